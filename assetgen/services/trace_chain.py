"""Folds a freshly built hop onto an asset's existing trace chain."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from assetgen.schemas.trace import Hop, TraceType

# Front hops of these types are not a custody hop of their own; the next hop is shown instead.
COLLAPSED_TYPES = {
    TraceType.WRAPPED.value,
    TraceType.SYNTHETIC.value,
    TraceType.FOREX.value,
}

# Liquid-staking providers whose liquid-stake hop is skipped rather than shown as IBC.
LIQUID_STAKE_POLICIES: Dict[str, str] = {
    "persistence": "collapse",
}

# Display denoms that always skip their front hop.
FORCED_COLLAPSE_DISPLAYS = {"gwbtc"}


@dataclass
class TraceChain:
    """Ordered hops, oldest first; the first hop fronts the asset for display."""

    hops: List[Dict[str, Any]]

    @property
    def front(self) -> Dict[str, Any]:
        return self.hops[0]

    @property
    def newest(self) -> Dict[str, Any]:
        return self.hops[-1]

    @property
    def hash_path(self) -> str:
        """Denom trace of the newest hop; this is what the IBC hash is taken over."""
        return self.newest["chain"]["path"]


def _collapse(chain: TraceChain) -> None:
    """Overwrite the front hop with a copy of the one behind it."""
    if len(chain.hops) > 1:
        chain.hops[0] = copy.deepcopy(chain.hops[1])


def normalize_trace_chain(
    existing_traces: Optional[List[Dict[str, Any]]],
    hop: Hop,
    display: Optional[str] = None,
) -> TraceChain:
    chain = TraceChain(hops=copy.deepcopy(existing_traces or []))
    chain.hops.append(hop.to_trace())

    front = chain.hops[0]
    front_type = front.get("type")
    if front_type in COLLAPSED_TYPES:
        _collapse(chain)
    elif front_type == TraceType.IBC_CW20.value:
        front["type"] = TraceType.IBC.value
    elif front_type == TraceType.LIQUID_STAKE.value:
        provider_chain = (front.get("counterparty") or {}).get("chain_name")
        if LIQUID_STAKE_POLICIES.get(provider_chain) == "collapse":
            _collapse(chain)
        else:
            front["type"] = TraceType.IBC.value

    if display in FORCED_COLLAPSE_DISPLAYS:
        _collapse(chain)

    return chain
