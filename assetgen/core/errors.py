"""Error taxonomy for asset list generation.

Each error carries a human readable ``error_name`` which is what ends up in the
run report next to the asset that failed.
"""

from typing import Optional


class AssetlistError(Exception):
    """Base class for every failure raised while generating an asset list."""

    error_name = "Asset List Error"
    default_message = "Asset list generation failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class FilePathError(AssetlistError):
    error_name = "File Path Error"
    default_message = "An error in the file path has resulted in a failure."


class RegistryLookupError(AssetlistError):
    error_name = "Chain Registry Error"
    default_message = "The requested entry could not be found in the chain registry."


class ChannelTopologyNotFound(AssetlistError):
    error_name = "IBC Connection Error"
    default_message = "The IBC connections can not be fetched."


class GenericError(AssetlistError):
    error_name = "Generic Error"
    default_message = "This is unexpected..."
