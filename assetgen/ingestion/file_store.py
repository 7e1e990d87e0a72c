"""Filesystem JSON store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from assetgen.core.errors import FilePathError, RegistryLookupError
from assetgen.core.logging import get_logger
from .base import BaseStore

log = get_logger("ingestion.file_store")


class JsonFileStore(BaseStore):
    """Reads JSON documents straight from disk."""

    name = "filesystem"

    async def read_json(self, path: Path) -> Any:
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            log.debug(f"Unable to read {path}: {exc}")
            raise FilePathError(f"Unable to read {path}: {exc}") from exc

        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise RegistryLookupError(f"Malformed JSON in {path}: {exc}") from exc