"""End-to-end asset list generation for one target chain."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from assetgen.core.config import GenerationConfig
from assetgen.core.errors import AssetlistError
from assetgen.core.logging import get_logger
from assetgen.ingestion.base import BaseStore
from assetgen.ingestion.file_store import JsonFileStore
from assetgen.ingestion.registry import RegistryAccessor
from assetgen.ingestion.zone import load_zone
from assetgen.schemas.assetlist import (
    ASSETLIST_SCHEMA,
    ASSETLIST_SCHEMA_REF,
    AssetFailure,
    GenerationReport,
)
from assetgen.schemas.zone import Zone, ZoneAsset
from .canonical import reorder_properties
from .enrichment import describe_chain, first_git_repo
from .ibc_hash import apply_ibc_identity
from .metadata_merger import merge_metadata
from .output_writer import AssetlistWriter
from .trace_builder import build_hop
from .trace_chain import normalize_trace_chain

log = get_logger("assetlist_service")


class AssetlistService:
    """Generates ``<chain_id>.assetlist.json`` from a zone file and the chain registry.

    Responsibilities:
    - Resolve each zone asset against the registry
    - Build IBC traces and hashed denoms for assets foreign to the target chain
    - Merge chain enrichment and zone overrides
    - Emit assets in canonical key order, in zone order
    - Record per-asset failures without stopping the run
    """

    def __init__(
        self,
        config: GenerationConfig,
        store: Optional[BaseStore] = None,
        writer: Optional[AssetlistWriter] = None,
    ):
        self.config = config
        self.store = store or JsonFileStore()
        self.registry = RegistryAccessor(self.store, config.registry_dir)
        self.writer = writer or AssetlistWriter()

    async def generate_asset(self, zone_asset: ZoneAsset) -> Dict[str, Any]:
        """Build one output asset; raises ``AssetlistError`` on structural failure."""
        asset = await self.registry.get_registered_asset(zone_asset.chain_name, zone_asset.base_denom)

        front_hop: Optional[Dict[str, Any]] = None
        if zone_asset.chain_name != self.config.chain_name:
            topology = await self.registry.get_channel_topology(
                zone_asset.chain_name, self.config.chain_name
            )
            hop = build_hop(self.config.chain_name, zone_asset, topology, asset.get("traces"))
            traces = normalize_trace_chain(asset.get("traces"), hop, asset.get("display"))
            asset["traces"] = traces.hops
            apply_ibc_identity(asset, zone_asset.base_denom, traces.hash_path)
            front_hop = traces.front
            log.debug(f"{zone_asset.chain_name}/{zone_asset.base_denom} -> {asset['base']} via {traces.hash_path}")
        elif asset.get("traces"):
            front_hop = asset["traces"][0]

        enrichment = await describe_chain(
            self.registry,
            zone_asset.chain_name,
            first_git_repo(zone_asset.frontend_properties.additional_information),
        )
        merge_metadata(asset, zone_asset, enrichment, front_hop)
        return reorder_properties(asset, ASSETLIST_SCHEMA)

    async def generate(self, zone: Zone) -> Tuple[List[Dict[str, Any]], List[AssetFailure]]:
        """Generate every zone asset in order, collecting failures instead of aborting."""
        assets: List[Dict[str, Any]] = []
        failures: List[AssetFailure] = []

        for zone_asset in zone.assets:
            try:
                assets.append(await self.generate_asset(zone_asset))
            except AssetlistError as exc:
                log.error(
                    f"Skipping {zone_asset.chain_name}/{zone_asset.base_denom}: {exc.error_name}: {exc}"
                )
                failures.append(
                    AssetFailure(
                        chain_name=zone_asset.chain_name,
                        base_denom=zone_asset.base_denom,
                        error_name=exc.error_name,
                        message=str(exc),
                    )
                )

        return assets, failures

    def build_document(self, assets: List[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            "$schema": ASSETLIST_SCHEMA_REF,
            "chain_name": self.config.chain_name,
            "assets": assets,
        }

    async def run(self) -> GenerationReport:
        """Load the zone file, generate all assets and write the asset list."""
        report = GenerationReport(chain_id=self.config.chain_id, chain_name=self.config.chain_name)
        log.info(f"Generating asset list for {self.config.chain_name} ({self.config.chain_id})")

        zone = await load_zone(self.store, self.config.zone_file)
        if zone.chain_name != self.config.chain_name:
            log.warning(f"Zone file {self.config.zone_file} names {zone.chain_name}, generating for {self.config.chain_name}")

        assets, failures = await self.generate(zone)
        report.assets_generated = len(assets)
        report.failures = failures

        try:
            report.output_path = await self.writer.write(self.build_document(assets), self.config.output_file)
        except AssetlistError as exc:
            log.error(f"Failed to write asset list for {self.config.chain_id}: {exc}")
            report.write_error = f"{exc.error_name}: {exc}"

        log.info(
            f"Asset list for {report.chain_id}: generated={report.assets_generated} "
            f"failed={len(report.failures)}"
        )
        return report
