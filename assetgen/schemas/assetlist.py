"""Output asset list shapes and the run report."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

ASSETLIST_SCHEMA_REF = "../assetlist.schema.json"

# Reference object whose key order every emitted asset follows.
ASSETLIST_SCHEMA: Dict[str, Any] = {
    "additional_information": [],
    "address": "string",
    "base": "string",
    "coingecko_id": "string",
    "denom_units": [],
    "description": "string",
    "display": "string",
    "keywords": [],
    "logo_URIs": {
        "png": "string",
        "svg": "string",
    },
    "name": "string",
    "pretty_path": "string",
    "symbol": "string",
    "traces": [],
    "type_asset": "string",
}


class AssetFailure(BaseModel):
    """A zone asset that could not be generated."""

    chain_name: str
    base_denom: str
    error_name: str
    message: str


class GenerationReport(BaseModel):
    chain_id: str
    chain_name: str
    assets_generated: int = 0
    failures: List[AssetFailure] = Field(default_factory=list)
    output_path: Optional[Path] = None
    write_error: Optional[str] = None

    @property
    def success(self) -> bool:
        return not self.failures and self.write_error is None
