"""Best-effort descriptive lookups against the registry's ``chain.json``.

Each field comes back as a ``FieldResult`` so the merger can tell a real value
from an in-band placeholder, and both from a failure that must stop the asset.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from assetgen.core.errors import AssetlistError, FilePathError, GenericError, RegistryLookupError
from assetgen.core.logging import get_logger
from assetgen.ingestion.registry import RegistryAccessor
from assetgen.schemas.chain import ChainDescriptor

log = get_logger("enrichment")

COIN_LANDING_ROOT = "https://www.coinlanding.page/post/"

PRETTY_NAME_PLACEHOLDER = "Error"
MISSING_IN_REGISTRY = "Error in Chain Registry."
LOOKUP_FAILED = "Error in Generation."


class FieldStatus(str, Enum):
    VALUE = "value"
    PLACEHOLDER = "placeholder"
    FATAL = "fatal"


@dataclass(frozen=True)
class FieldResult:
    status: FieldStatus
    value: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def of(cls, value: str) -> "FieldResult":
        return cls(FieldStatus.VALUE, value)

    @classmethod
    def placeholder(cls, marker: str, error: Optional[str] = None) -> "FieldResult":
        return cls(FieldStatus.PLACEHOLDER, marker, error)

    @classmethod
    def fatal(cls, error: str) -> "FieldResult":
        return cls(FieldStatus.FATAL, None, error)

    @property
    def is_value(self) -> bool:
        return self.status is FieldStatus.VALUE

    def resolve(self) -> str:
        """The value or placeholder; raises for a fatal result."""
        if self.status is FieldStatus.FATAL:
            raise GenericError(self.error)
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True)
class ChainEnrichment:
    pretty_name: FieldResult
    website: FieldResult
    landing_page: FieldResult
    git_repo: FieldResult


def first_git_repo(additional_information: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    for item in additional_information or []:
        if item.get("git_repo"):
            return item["git_repo"]
    return None


def enrich_from_descriptor(
    descriptor: ChainDescriptor, override_git_repo: Optional[str] = None
) -> ChainEnrichment:
    codebase_repo = descriptor.codebase.git_repo if descriptor.codebase else None
    git_repo = override_git_repo or codebase_repo
    return ChainEnrichment(
        pretty_name=(
            FieldResult.of(descriptor.pretty_name)
            if descriptor.pretty_name
            else FieldResult.placeholder(PRETTY_NAME_PLACEHOLDER, "chain.json has no pretty_name")
        ),
        website=(
            FieldResult.of(descriptor.website)
            if descriptor.website
            else FieldResult.placeholder(MISSING_IN_REGISTRY, "chain.json has no website")
        ),
        landing_page=FieldResult.of(COIN_LANDING_ROOT + descriptor.chain_name),
        git_repo=(
            FieldResult.of(git_repo)
            if git_repo
            else FieldResult.placeholder(MISSING_IN_REGISTRY, "No git repo found")
        ),
    )


def enrichment_unavailable(
    result: FieldResult, override_git_repo: Optional[str] = None
) -> ChainEnrichment:
    """Every field degraded to ``result``, except a zone-supplied git repo."""
    return ChainEnrichment(
        pretty_name=(
            result
            if result.status is FieldStatus.FATAL
            else FieldResult.placeholder(PRETTY_NAME_PLACEHOLDER, result.error)
        ),
        website=result,
        landing_page=result,
        git_repo=FieldResult.of(override_git_repo) if override_git_repo else result,
    )


async def describe_chain(
    registry: RegistryAccessor,
    chain_name: str,
    override_git_repo: Optional[str] = None,
) -> ChainEnrichment:
    try:
        descriptor = await registry.get_chain(chain_name)
    except (FilePathError, RegistryLookupError) as exc:
        log.warning(f"chain.json lookup failed for {chain_name}, using placeholders: {exc}")
        return enrichment_unavailable(FieldResult.placeholder(LOOKUP_FAILED, str(exc)), override_git_repo)
    except AssetlistError as exc:
        log.error(f"chain.json lookup for {chain_name} failed unexpectedly: {exc}")
        return enrichment_unavailable(FieldResult.fatal(str(exc)), override_git_repo)

    enrichment = enrich_from_descriptor(descriptor, override_git_repo)
    for field_name in ("pretty_name", "website", "git_repo"):
        result: FieldResult = getattr(enrichment, field_name)
        if not result.is_value:
            log.warning(f"{chain_name}: {field_name} unavailable ({result.error})")
    return enrichment
