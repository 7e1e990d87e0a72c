"""Subset of the registry's ``chain.json`` used for descriptive enrichment."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Codebase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    git_repo: Optional[str] = None


class ChainDescriptor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    chain_name: str
    pretty_name: Optional[str] = None
    website: Optional[str] = None
    codebase: Optional[Codebase] = None
