"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from tatum.config import AppConfig, TatumConfig
from tatum.registry import CollaboratorKind, ScopedRegistry


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mainnet_config() -> TatumConfig:
    return TatumConfig(network="ethereum", api_key="main-key", timeout=10)


@pytest.fixture()
def testnet_config() -> TatumConfig:
    return TatumConfig(network="ethereum-sepolia", api_key="test-key", timeout=10)


@pytest.fixture()
def sample_app_config(
    mainnet_config: TatumConfig, testnet_config: TatumConfig
) -> AppConfig:
    return AppConfig(instances={"mainnet": mainnet_config, "testnet": testnet_config})


# ---------------------------------------------------------------------------
# Registry with mocked collaborators
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_connector() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def mock_ipfs() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def registry(
    mainnet_config: TatumConfig, mock_connector: AsyncMock, mock_ipfs: AsyncMock
) -> ScopedRegistry:
    reg = ScopedRegistry()
    reg.register(CollaboratorKind.CONNECTOR, lambda r, instance_id: mock_connector)
    reg.register(CollaboratorKind.IPFS, lambda r, instance_id: mock_ipfs)
    reg.configure("test", mainnet_config)
    return reg


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    instances:
      mainnet:
        network: ethereum
        api_key: "key-1"
        timeout: 15
      testnet:
        network: ethereum-sepolia
        base_url: "https://api.example.com/"
        verbose: true
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample API payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_token_detail() -> dict:
    return {
        "chain": "ethereum",
        "tokenId": "1",
        "tokenType": "nft",
        "metadataURI": "ipfs://QmMeta",
        "metadata": {"name": "Token #1"},
    }


@pytest.fixture()
def sample_transaction() -> dict:
    return {
        "chain": "ethereum",
        "hash": "0xHASH",
        "address": "0xA",
        "counterAddress": "0xB",
        "tokenAddress": "0xCONTRACT",
        "tokenId": "1",
        "blockNumber": 100,
        "transactionType": "outgoing",
        "transactionSubtype": "transfer",
    }
