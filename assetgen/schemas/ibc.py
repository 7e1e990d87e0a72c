"""Channel topology schemas (``_IBC/<chain_1>-<chain_2>.json``).

``chain_1`` and ``chain_2`` are always in lexicographic order of chain name.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IbcChainInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    chain_name: str
    client_id: Optional[str] = None
    connection_id: Optional[str] = None


class ChannelEnd(BaseModel):
    model_config = ConfigDict(extra="ignore")

    channel_id: str
    port_id: str


class ChannelTags(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dex: Optional[str] = None
    preferred: Optional[bool] = None
    properties: Optional[str] = None
    status: Optional[str] = None


class Channel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    chain_1: ChannelEnd
    chain_2: ChannelEnd
    ordering: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[ChannelTags] = None


class ChannelTopology(BaseModel):
    model_config = ConfigDict(extra="ignore")

    chain_1: Optional[IbcChainInfo] = None
    chain_2: Optional[IbcChainInfo] = None
    channels: List[Channel] = Field(default_factory=list)


def order_chain_pair(chain_a: str, chain_b: str) -> tuple[str, str]:
    """Return the pair as ``(chain_1, chain_2)``, smaller name first."""
    if chain_b < chain_a:
        return chain_b, chain_a
    return chain_a, chain_b


def topology_file_name(chain_a: str, chain_b: str) -> str:
    chain_1, chain_2 = order_chain_pair(chain_a, chain_b)
    return f"{chain_1}-{chain_2}.json"
