# Schemas package
from assetgen.schemas.assetlist import ASSETLIST_SCHEMA, AssetFailure, GenerationReport
from assetgen.schemas.chain import ChainDescriptor, Codebase
from assetgen.schemas.ibc import Channel, ChannelEnd, ChannelTopology
from assetgen.schemas.trace import Counterparty, Hop, HopChain, TraceType
from assetgen.schemas.zone import FrontendProperties, Zone, ZoneAsset

__all__ = [
    "ASSETLIST_SCHEMA",
    "AssetFailure",
    "GenerationReport",
    "ChainDescriptor",
    "Codebase",
    "Channel",
    "ChannelEnd",
    "ChannelTopology",
    "Counterparty",
    "Hop",
    "HopChain",
    "TraceType",
    "FrontendProperties",
    "Zone",
    "ZoneAsset",
]
