"""Key ordering for emitted assets."""

from __future__ import annotations

from typing import Any, Dict


def _is_populated(value: Any) -> bool:
    return value is not None and value != ""


def reorder_properties(obj: Any, reference: Any) -> Any:
    """Rebuild ``obj`` with the key order of ``reference``.

    Recurses into nested dicts, leaves lists untouched, and drops keys that are
    missing from either side or hold no value.
    """
    if not isinstance(obj, dict) or not isinstance(reference, dict):
        return obj

    ordered: Dict[str, Any] = {}
    for key, ref_value in reference.items():
        if key in obj and _is_populated(obj[key]) and _is_populated(ref_value):
            ordered[key] = reorder_properties(obj[key], ref_value)
    return ordered
