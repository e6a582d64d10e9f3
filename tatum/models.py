"""Request and response models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, TypedDict


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_body(record: Any, exclude: tuple[str, ...] = ()) -> dict[str, Any]:
    """Serialize a request record to a JSON body with camelCase keys.

    Fields left as ``None`` are omitted.
    """
    body: dict[str, Any] = {}
    for f in fields(record):
        if f.name in exclude:
            continue
        value = getattr(record, f.name)
        if value is not None:
            body[f.metadata.get("wire", _camel(f.name))] = value
    return body


# ---------------------------------------------------------------------------
# Collection deployment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreateNftCollectionBase:
    """Minimal collection deployment (TZIP-12 on Tezos)."""

    owner: str
    name: str | None = None
    symbol: str | None = None


@dataclass(frozen=True)
class CreateNftEvmCollection:
    """ERC-721 collection deployment."""

    name: str
    symbol: str
    owner: str
    minter: str | None = None
    base_uri: str | None = field(default=None, metadata={"wire": "baseURI"})


@dataclass(frozen=True)
class CreateMultiTokenNftCollection:
    """ERC-1155 collection deployment."""

    owner: str
    minter: str | None = None
    base_uri: str | None = field(default=None, metadata={"wire": "baseURI"})


# ---------------------------------------------------------------------------
# Minting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MintNftWithUrl:
    contract_address: str
    to: str
    url: str
    token_id: str | None = None


@dataclass(frozen=True)
class MintNftWithMetadata:
    """Mint after uploading ``file`` and ``metadata`` to IPFS.

    ``metadata`` should at least carry a ``name``; its ``image`` key is
    replaced by the IPFS locator of ``file``.
    """

    contract_address: str
    to: str
    file: bytes
    metadata: dict[str, Any] = field(default_factory=dict)
    token_id: str | None = None


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddressBalanceFilters:
    addresses: tuple[str, ...]
    page: int = 0
    page_size: int = 50


@dataclass(frozen=True)
class GetAllNftTransactionsQuery:
    token_address: str
    token_id: str | None = None
    transaction_type: str | None = None
    from_block: int | None = None
    to_block: int | None = None
    page: int = 0
    page_size: int = 50


@dataclass(frozen=True)
class GetAllNftTransactionsByAddress:
    addresses: tuple[str, ...]
    token_address: str | None = None
    token_id: str | None = None
    transaction_type: str | None = None
    from_block: int | None = None
    to_block: int | None = None
    page: int = 0
    page_size: int = 50


@dataclass(frozen=True)
class GetNftMetadata:
    token_address: str
    token_id: str


@dataclass(frozen=True)
class GetTokenOwner:
    token_address: str
    token_id: str
    page: int = 0
    page_size: int = 50


@dataclass(frozen=True)
class CheckTokenOwner:
    token_address: str
    token_id: str
    owner: str


@dataclass(frozen=True)
class GetCollection:
    collection_address: str
    exclude_metadata: bool = False
    page: int = 0
    page_size: int = 50


# ---------------------------------------------------------------------------
# Response shapes (parsed JSON, keys as sent by the API)
# ---------------------------------------------------------------------------


class NftAddressBalance(TypedDict, total=False):
    address: str
    balance: str
    chain: str
    metadata: dict[str, Any]
    metadataURI: str
    tokenAddress: str
    tokenId: str
    type: str


class NftTransaction(TypedDict, total=False):
    address: str
    amount: str
    blockNumber: int
    chain: str
    counterAddress: str
    hash: str
    timestamp: int
    tokenAddress: str
    tokenId: str
    transactionIndex: int
    transactionSubtype: str
    transactionType: str


class NftTokenDetail(TypedDict, total=False):
    chain: str
    metadata: dict[str, Any]
    metadataURI: str
    tokenId: str
    tokenType: str
