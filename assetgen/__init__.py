"""Generate chain asset lists from zone files and the Cosmos chain registry."""

__version__ = "1.0.0"
