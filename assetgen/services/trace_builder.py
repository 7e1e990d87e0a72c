"""Builds the IBC hop that moves a counterparty asset onto the target chain.

Everything here is a pure function of its arguments: the caller fetches the
channel topology and passes it in.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from assetgen.core.errors import ChannelTopologyNotFound, RegistryLookupError
from assetgen.schemas.ibc import Channel, ChannelTopology, order_chain_pair
from assetgen.schemas.trace import Counterparty, Hop, HopChain, TraceType
from assetgen.schemas.zone import ZoneAsset

TRANSFER_PORT = "transfer"
CW20_PORT = "wasm."
CW20_PREFIX = "cw20:"
FACTORY_PREFIX = "factory"
PORT_MATCH_LENGTH = 5

# Trace types whose chain.path can be extended by another IBC hop.
CHAINABLE_TYPES = {TraceType.IBC.value, TraceType.IBC_CW20.value}


def hop_type_for(base_denom: str) -> TraceType:
    if base_denom.startswith(CW20_PREFIX):
        return TraceType.IBC_CW20
    return TraceType.IBC


def find_channel(
    topology: ChannelTopology, chain_1_port: str, chain_2_port: str
) -> Optional[Channel]:
    """First channel whose ports match the expected ones on their 5-char prefix."""
    for channel in topology.channels:
        if (
            channel.chain_1.port_id[:PORT_MATCH_LENGTH] == chain_1_port[:PORT_MATCH_LENGTH]
            and channel.chain_2.port_id[:PORT_MATCH_LENGTH] == chain_2_port[:PORT_MATCH_LENGTH]
        ):
            return channel
    return None


def inner_denom(base_denom: str, existing_traces: Sequence[Dict[str, Any]]) -> str:
    """The part of the path that sits behind ``<port>/<channel>/``."""
    if existing_traces:
        last = existing_traces[-1]
        if last.get("type") in CHAINABLE_TYPES:
            previous_path = (last.get("chain") or {}).get("path")
            if not previous_path:
                raise RegistryLookupError(f"Registered IBC trace for {base_denom} is missing its path")
            return previous_path

    if base_denom.startswith(FACTORY_PREFIX):
        return base_denom.replace("/", ":")
    return base_denom


def build_hop(
    target_chain_name: str,
    zone_asset: ZoneAsset,
    topology: ChannelTopology,
    existing_traces: Optional[List[Dict[str, Any]]] = None,
) -> Hop:
    """Describe the transfer of ``zone_asset`` from its chain onto ``target_chain_name``.

    Raises ``ChannelTopologyNotFound`` when no channel in ``topology`` joins the
    expected ports, so a hop is never returned without channel identifiers.
    """
    counterparty_chain = zone_asset.chain_name
    base_denom = zone_asset.base_denom
    hop_type = hop_type_for(base_denom)

    ports = {
        counterparty_chain: CW20_PORT if hop_type is TraceType.IBC_CW20 else TRANSFER_PORT,
        target_chain_name: TRANSFER_PORT,
    }
    chain_1, chain_2 = order_chain_pair(counterparty_chain, target_chain_name)

    channel = find_channel(topology, ports[chain_1], ports[chain_2])
    if channel is None:
        raise ChannelTopologyNotFound(
            f"No {ports[counterparty_chain]} channel between {counterparty_chain} and {target_chain_name}"
        )

    if chain_1 == counterparty_chain:
        counterparty_end, target_end = channel.chain_1, channel.chain_2
    else:
        counterparty_end, target_end = channel.chain_2, channel.chain_1

    inner = inner_denom(base_denom, existing_traces or [])
    path = f"{target_end.port_id}/{target_end.channel_id}/{inner}"

    # Ports are only kept on contract transfers; plain ICS-20 hops omit them.
    keep_ports = hop_type is not TraceType.IBC
    return Hop(
        type=hop_type,
        counterparty=Counterparty(
            chain_name=counterparty_chain,
            base_denom=base_denom,
            port=counterparty_end.port_id if keep_ports else None,
            channel_id=counterparty_end.channel_id,
        ),
        chain=HopChain(
            channel_id=target_end.channel_id,
            port=target_end.port_id if keep_ports else None,
            path=path,
        ),
    )
