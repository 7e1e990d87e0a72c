"""Zone file loading."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from assetgen.core.errors import RegistryLookupError
from assetgen.core.logging import get_logger
from assetgen.schemas.zone import Zone
from .base import BaseStore

log = get_logger("ingestion.zone")


async def load_zone(store: BaseStore, path: Path) -> Zone:
    """Read and validate ``<chain_name>.zone.json``."""
    payload = await store.read_json(path)
    try:
        zone = Zone.model_validate(payload)
    except ValidationError as exc:
        raise RegistryLookupError(f"Invalid zone file {path}: {exc}") from exc
    log.info(f"Loaded {len(zone.assets)} zone assets for {zone.chain_name} from {path}")
    return zone
