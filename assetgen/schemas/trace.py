"""Provenance hop schemas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class TraceType(str, Enum):
    IBC = "ibc"
    IBC_CW20 = "ibc-cw20"
    WRAPPED = "wrapped"
    SYNTHETIC = "synthetic"
    FOREX = "forex"
    LIQUID_STAKE = "liquid-stake"
    BRIDGE = "bridge"
    ADDITIONAL_MINTAGE = "additional-mintage"
    TEST_MINTAGE = "test-mintage"


class Counterparty(BaseModel):
    """Where the asset came from on this hop."""

    chain_name: str
    base_denom: str
    port: Optional[str] = None
    channel_id: Optional[str] = None


class HopChain(BaseModel):
    """The receiving side of a hop. ``path`` is the denom trace on that chain."""

    channel_id: str
    port: Optional[str] = None
    path: str


class Hop(BaseModel):
    type: TraceType
    counterparty: Counterparty
    chain: HopChain
    provider: Optional[str] = None

    def to_trace(self) -> dict:
        """Dump as a plain registry-style trace dict, dropping unset fields."""
        return self.model_dump(mode="json", exclude_none=True)
