"""IBC denom hashing."""

from __future__ import annotations

import hashlib
from typing import Any, Dict

IBC_DENOM_PREFIX = "ibc/"


def ibc_hash(path: str) -> str:
    """``ibc/`` + uppercase hex SHA-256 of the denom trace path."""
    return IBC_DENOM_PREFIX + hashlib.sha256(path.encode("utf-8")).hexdigest().upper()


def apply_ibc_identity(asset: Dict[str, Any], original_base: str, path: str) -> str:
    """Re-key ``asset`` under the hash of ``path`` and keep the old base as an alias."""
    denom = ibc_hash(path)
    asset["base"] = denom
    for unit in asset.get("denom_units") or []:
        if unit.get("denom") == original_base:
            unit["aliases"] = [*(unit.get("aliases") or []), original_base]
            unit["denom"] = denom
    return denom
