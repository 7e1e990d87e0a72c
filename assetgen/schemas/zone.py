"""Zone file schemas (``<chain_name>.zone.json``)."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FrontendProperties(BaseModel):
    """Zone-supplied overrides for how an asset appears on front ends."""

    model_config = ConfigDict(extra="ignore")

    symbol: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[List[str]] = None
    logo_URIs: Optional[Dict[str, str]] = None
    coingecko_id: Optional[str] = None
    pretty_path: Optional[str] = None
    additional_information: Optional[List[Dict[str, Any]]] = None


class ZoneAsset(BaseModel):
    """One asset the target chain's list should include."""

    model_config = ConfigDict(extra="ignore")

    chain_name: str
    base_denom: str
    chain_name_pretty: Optional[str] = None
    frontend_properties: FrontendProperties = Field(default_factory=FrontendProperties)


class Zone(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    schema_: Optional[str] = Field(default=None, alias="$schema")
    chain_name: str
    assets: List[ZoneAsset] = Field(default_factory=list)
