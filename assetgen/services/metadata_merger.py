"""Overlays registry enrichment and zone overrides onto a generated asset."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from assetgen.schemas.trace import TraceType
from assetgen.schemas.zone import ZoneAsset
from .enrichment import ChainEnrichment, FieldStatus

# Counterparty chain -> block explorer root; the token page is <root><base_denom>.
BLOCK_EXPLORER_ROOTS: Dict[str, str] = {
    "ethereum": "https://etherscan.io/token/",
    "polygon": "https://polygonscan.com/token/",
    "moonbeam": "https://moonscan.io/token/",
    "avalanche": "https://snowtrace.io/token/",
    "fantom": "https://ftmscan.com/token/",
    "binancesmartchain": "https://bscscan.com/token/",
}

# Keyword -> (additional_information key, link root) for DEX integrations.
DEX_LINKS: Dict[str, tuple[str, str]] = {
    "Sinfonia": ("sinfonia_link", "https://app.sinfonia.zone/fantokens/"),
}

OVERRIDE_FIELDS = ("symbol", "description", "pretty_path", "logo_URIs", "coingecko_id")


def block_explorer_link(front_hop: Optional[Dict[str, Any]]) -> Optional[Dict[str, str]]:
    if not front_hop or front_hop.get("type") == TraceType.IBC.value:
        return None
    counterparty = front_hop.get("counterparty") or {}
    root = BLOCK_EXPLORER_ROOTS.get(counterparty.get("chain_name"))
    if root is None:
        return None
    return {"block_explorer_link": root + counterparty.get("base_denom", "")}


def dex_links(keywords: List[str], front_hop: Optional[Dict[str, Any]]) -> List[Dict[str, str]]:
    if not front_hop:
        return []
    base_denom = (front_hop.get("counterparty") or {}).get("base_denom", "")
    return [{key: root + base_denom} for tag, (key, root) in DEX_LINKS.items() if tag in keywords]


def resolve_name(enrichment: ChainEnrichment, zone_asset: ZoneAsset) -> str:
    pretty = enrichment.pretty_name
    if pretty.status is FieldStatus.PLACEHOLDER and zone_asset.chain_name_pretty:
        return zone_asset.chain_name_pretty
    return pretty.resolve()


def merge_metadata(
    asset: Dict[str, Any],
    zone_asset: ZoneAsset,
    enrichment: ChainEnrichment,
    front_hop: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Apply overrides and derived links to ``asset`` in place and return it.

    ``front_hop`` is the display-relevant hop of the asset's trace chain, or
    ``None`` for assets native to the target chain.
    """
    override = zone_asset.frontend_properties

    additional: List[Dict[str, Any]] = [
        dict(item) for item in override.additional_information or [] if not item.get("git_repo")
    ]
    explorer = block_explorer_link(front_hop)
    if explorer:
        additional.append(explorer)

    asset["name"] = resolve_name(enrichment, zone_asset)
    for field_name in OVERRIDE_FIELDS:
        value = getattr(override, field_name)
        if value:
            asset[field_name] = dict(value) if isinstance(value, dict) else value

    keywords = list(asset.get("keywords") or [])
    keywords.extend(override.keywords or [])
    if keywords:
        asset["keywords"] = keywords

    additional.append({"chain_website": enrichment.website.resolve()})
    additional.append({"coin_landing_page": enrichment.landing_page.resolve()})
    additional.append({"git_repo": enrichment.git_repo.resolve()})
    additional.extend(dex_links(keywords, front_hop))

    asset["additional_information"] = additional
    return asset
