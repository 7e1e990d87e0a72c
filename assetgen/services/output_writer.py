"""Writes the generated asset list to disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from assetgen.core.errors import FilePathError, GenericError
from assetgen.core.logging import get_logger

log = get_logger("output_writer")


class AssetlistWriter:
    """Serializes an asset list document as 2-space indented JSON."""

    async def write(self, assetlist: Dict[str, Any], path: Path) -> Path:
        path = Path(path)
        try:
            payload = json.dumps(assetlist, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise GenericError(f"Asset list is not serializable: {exc}") from exc

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise FilePathError(f"Unable to write {path}: {exc}") from exc

        log.info(f"Wrote {len(assetlist.get('assets', []))} assets to {path}")
        return path
