"""Shared fixtures: a small on-disk chain registry and zone tree."""

import json
import os
import tempfile
from pathlib import Path

os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "assetgen-test-logs"))

import pytest  # noqa: E402

from assetgen.core.config import GenerationConfig  # noqa: E402
from assetgen.schemas.zone import Zone  # noqa: E402

ATOM_ON_OSMOSIS = "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E5EB2"
WETH_CONTRACT = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


def write_json(path: Path, payload) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def _chain(chain_name, pretty_name, website=None, git_repo=None):
    payload = {"chain_name": chain_name, "pretty_name": pretty_name}
    if website:
        payload["website"] = website
    if git_repo:
        payload["codebase"] = {"git_repo": git_repo}
    return payload


def _channel(chain_1, chain_2):
    return {
        "chain_1": {"channel_id": chain_1[0], "port_id": chain_1[1]},
        "chain_2": {"channel_id": chain_2[0], "port_id": chain_2[1]},
        "ordering": "unordered",
        "version": "ics20-1",
    }


REGISTRY = {
    "cosmoshub": {
        "chain": _chain("cosmoshub", "Cosmos Hub", "https://cosmos.network/", "https://github.com/cosmos/gaia"),
        "assets": [
            {
                "description": "The native staking and governance token of the Cosmos Hub.",
                "denom_units": [
                    {"denom": "uatom", "exponent": 0},
                    {"denom": "atom", "exponent": 6},
                ],
                "base": "uatom",
                "name": "Cosmos Hub Atom",
                "display": "atom",
                "symbol": "ATOM",
                "logo_URIs": {
                    "png": "https://example.org/atom.png",
                    "svg": "https://example.org/atom.svg",
                },
                "coingecko_id": "cosmos",
                "keywords": ["Staking"],
                "type_asset": "sdk.coin",
            }
        ],
    },
    "osmosis": {
        "chain": _chain("osmosis", "Osmosis", "https://osmosis.zone/", "https://github.com/osmosis-labs/osmosis"),
        "assets": [
            {
                "description": "The native token of Osmosis",
                "denom_units": [
                    {"denom": "uosmo", "exponent": 0},
                    {"denom": "osmo", "exponent": 6},
                ],
                "base": "uosmo",
                "name": "Osmosis",
                "display": "osmo",
                "symbol": "OSMO",
                "logo_URIs": {"png": "https://example.org/osmo.png"},
            }
        ],
    },
    "juno": {
        "chain": _chain("juno", "Juno", "https://junonetwork.io/"),
        "assets": [
            {
                "description": "A cw20 token on Juno",
                "denom_units": [
                    {"denom": "cw20:juno1token", "exponent": 0},
                    {"denom": "tok", "exponent": 6},
                ],
                "type_asset": "cw20",
                "address": "juno1token",
                "base": "cw20:juno1token",
                "name": "Token",
                "display": "tok",
                "symbol": "TOK",
            },
            {
                "denom_units": [
                    {"denom": "factory/juno1creator/ufan", "exponent": 0},
                    {"denom": "fan", "exponent": 6},
                ],
                "base": "factory/juno1creator/ufan",
                "name": "Fan",
                "display": "fan",
                "symbol": "FAN",
            },
        ],
    },
    "axelar": {
        "chain": _chain("axelar", "Axelar", "https://axelar.network/"),
        "assets": [
            {
                "description": "Wrapped Ether on Axelar",
                "denom_units": [
                    {"denom": "weth-wei", "exponent": 0},
                    {"denom": "weth", "exponent": 18},
                ],
                "base": "weth-wei",
                "name": "Wrapped Ether",
                "display": "weth",
                "symbol": "WETH",
                "traces": [
                    {
                        "type": "bridge",
                        "counterparty": {"chain_name": "ethereum", "base_denom": WETH_CONTRACT},
                        "provider": "Axelar",
                    }
                ],
            }
        ],
    },
    "crescent": {
        "chain": _chain("crescent", "Crescent"),
        "assets": [
            {
                "denom_units": [
                    {"denom": "ibc/ATOMONCRESCENT", "exponent": 0, "aliases": ["uatom"]},
                    {"denom": "atom", "exponent": 6},
                ],
                "base": "ibc/ATOMONCRESCENT",
                "name": "Cosmos Hub Atom",
                "display": "atom",
                "symbol": "ATOM",
                "traces": [
                    {
                        "type": "ibc",
                        "counterparty": {
                            "chain_name": "cosmoshub",
                            "base_denom": "uatom",
                            "channel_id": "channel-326",
                        },
                        "chain": {"channel_id": "channel-1", "path": "transfer/channel-1/uatom"},
                    }
                ],
            }
        ],
    },
}

TOPOLOGY = {
    "cosmoshub-osmosis.json": [
        _channel(("channel-141", "transfer"), ("channel-0", "transfer")),
    ],
    "axelar-osmosis.json": [
        _channel(("channel-3", "transfer"), ("channel-208", "transfer")),
    ],
    "juno-osmosis.json": [
        _channel(("channel-0", "transfer"), ("channel-42", "transfer")),
        _channel(("channel-47", "wasm.juno1bridge"), ("channel-169", "transfer")),
    ],
    "crescent-osmosis.json": [
        _channel(("channel-9", "icahost"), ("channel-400", "icacontroller-1")),
        _channel(("channel-9", "transfer"), ("channel-297", "transfer")),
    ],
}


@pytest.fixture
def registry_root(tmp_path) -> Path:
    """Chain registry tree under a temp dir."""
    root = tmp_path / "chain-registry"
    for chain_name, entry in REGISTRY.items():
        write_json(root / chain_name / "chain.json", entry["chain"])
        write_json(root / chain_name / "assetlist.json", {"chain_name": chain_name, "assets": entry["assets"]})
    for file_name, channels in TOPOLOGY.items():
        chain_1, chain_2 = file_name[: -len(".json")].split("-", 1)
        write_json(
            root / "_IBC" / file_name,
            {
                "chain_1": {"chain_name": chain_1, "client_id": "07-tendermint-1", "connection_id": "connection-1"},
                "chain_2": {"chain_name": chain_2, "client_id": "07-tendermint-2", "connection_id": "connection-2"},
                "channels": channels,
            },
        )
    return root


@pytest.fixture
def config(tmp_path, registry_root) -> GenerationConfig:
    return GenerationConfig(
        chain_name="osmosis",
        chain_id="osmosis-1",
        chain_registry_root=registry_root,
        assetlists_root=tmp_path / "assetlists",
    )


@pytest.fixture
def zone_payload() -> dict:
    return {
        "$schema": "../zone.schema.json",
        "chain_name": "osmosis",
        "assets": [
            {"chain_name": "osmosis", "base_denom": "uosmo", "frontend_properties": {"keywords": ["Native"]}},
            {
                "chain_name": "cosmoshub",
                "base_denom": "uatom",
                "frontend_properties": {"keywords": ["Native"], "symbol": "ATOM"},
            },
            {"chain_name": "axelar", "base_denom": "weth-wei", "frontend_properties": {"symbol": "WETH.axl"}},
        ],
    }


@pytest.fixture
def zone(zone_payload) -> Zone:
    return Zone.model_validate(zone_payload)


@pytest.fixture
def zone_file(config, zone_payload) -> Path:
    return write_json(config.zone_file, zone_payload)
