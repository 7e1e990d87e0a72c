"""Chain registry lookups.

Thin accessor over the registry tree::

    <registry_dir>/<chain_name>/assetlist.json
    <registry_dir>/<chain_name>/chain.json
    <registry_dir>/_IBC/<chain_1>-<chain_2>.json
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from assetgen.core.config import ASSETLIST_FILE_NAME, CHAIN_FILE_NAME, IBC_FOLDER_NAME
from assetgen.core.errors import ChannelTopologyNotFound, FilePathError, RegistryLookupError
from assetgen.core.logging import get_logger
from assetgen.schemas.chain import ChainDescriptor
from assetgen.schemas.ibc import ChannelTopology, topology_file_name
from .base import BaseStore

log = get_logger("ingestion.registry")


class RegistryAccessor:
    """Resolves registered assets, chain descriptors and channel topology."""

    def __init__(self, store: BaseStore, registry_dir: Path):
        self.store = store
        self.registry_dir = Path(registry_dir)

    async def get_registered_asset(self, chain_name: str, base_denom: str) -> Dict[str, Any]:
        """Return a deep copy of the asset registered on ``chain_name`` under ``base_denom``."""
        path = self.registry_dir / chain_name / ASSETLIST_FILE_NAME
        payload = await self.store.read_json(path)

        assets = payload.get("assets") if isinstance(payload, dict) else None
        if not isinstance(assets, list):
            raise RegistryLookupError(f"{path} has no assets array")

        for registered in assets:
            if isinstance(registered, dict) and registered.get("base") == base_denom:
                return copy.deepcopy(registered)

        raise RegistryLookupError(f"Asset {base_denom} is not registered on {chain_name}")

    async def get_chain(self, chain_name: str) -> ChainDescriptor:
        path = self.registry_dir / chain_name / CHAIN_FILE_NAME
        payload = await self.store.read_json(path)
        try:
            return ChainDescriptor.model_validate(payload)
        except ValidationError as exc:
            raise RegistryLookupError(f"Invalid chain descriptor {path}: {exc}") from exc

    async def get_channel_topology(self, chain_a: str, chain_b: str) -> ChannelTopology:
        path = self.registry_dir / IBC_FOLDER_NAME / topology_file_name(chain_a, chain_b)
        try:
            payload = await self.store.read_json(path)
        except FilePathError as exc:
            raise ChannelTopologyNotFound(
                f"No channel topology between {chain_a} and {chain_b} ({path.name})"
            ) from exc

        try:
            topology = ChannelTopology.model_validate(payload)
        except ValidationError as exc:
            raise RegistryLookupError(f"Invalid channel topology {path}: {exc}") from exc
        log.debug(f"Loaded {len(topology.channels)} channels from {path.name}")
        return topology
