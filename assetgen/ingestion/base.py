"""Abstract store interface for registry and zone reads."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class BaseStore(ABC):
    """Read-only JSON document store."""

    name: str

    @abstractmethod
    async def read_json(self, path: Path) -> Any:
        """Return the parsed document at ``path``.

        Must raise ``FilePathError`` when the document is missing or unreadable
        and ``RegistryLookupError`` when it is not valid JSON.
        """