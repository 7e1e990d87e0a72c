"""Asset list entrypoint - Standalone script for generating a chain's asset list.

Usage:
    python -m assetgen.generate_entrypoint                      # CHAIN_NAME / CHAIN_ID from env
    python -m assetgen.generate_entrypoint osmosis osmosis-1    # explicit target chain
"""

import asyncio
import sys
from typing import List, Optional

from assetgen.core.config import GenerationConfig, settings
from assetgen.core.errors import AssetlistError
from assetgen.core.logging import get_logger
from assetgen.schemas.assetlist import GenerationReport
from assetgen.services.assetlist_service import AssetlistService

logger = get_logger("generate_entrypoint")


async def run_generation(config: GenerationConfig) -> GenerationReport:
    """Generate the asset list for a single target chain."""
    logger.info(f"Starting asset list generation for chain: {config.chain_id}")
    service = AssetlistService(config)
    report = await service.run()
    logger.info(f"Generation completed for {config.chain_id}: {report.assets_generated} assets")
    return report


def main(argv: Optional[List[str]] = None) -> GenerationReport:
    """Main entry point for asset list generation."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (0, 2):
        logger.error("Usage: generate_entrypoint [CHAIN_NAME CHAIN_ID]")
        sys.exit(2)

    try:
        config = GenerationConfig.from_settings(settings, *args)
        report = asyncio.run(run_generation(config))
    except AssetlistError as exc:
        logger.error(f"Asset list generation failed: {exc.error_name}: {exc}")
        sys.exit(1)

    for failure in report.failures:
        logger.warning(
            f"Not generated: {failure.chain_name}/{failure.base_denom} ({failure.error_name}: {failure.message})"
        )
    if report.write_error:
        logger.error(f"Output not written: {report.write_error}")

    logger.info(
        f"Chain {report.chain_id}: generated={report.assets_generated} failed={len(report.failures)}"
    )

    # Exit with error code if any asset failed or nothing was written
    if not report.success:
        sys.exit(1)

    return report


if __name__ == "__main__":
    main()
