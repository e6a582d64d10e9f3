"""NFT operations — collection deployment, minting and NFT data queries."""
from __future__ import annotations

import json
import logging
from typing import Any

from ..config import TatumConfig
from ..interfaces.connector import Connector
from ..interfaces.uploader import Uploader
from ..models import (
    AddressBalanceFilters,
    CheckTokenOwner,
    CreateMultiTokenNftCollection,
    CreateNftCollectionBase,
    CreateNftEvmCollection,
    GetAllNftTransactionsByAddress,
    GetAllNftTransactionsQuery,
    GetCollection,
    GetNftMetadata,
    GetTokenOwner,
    MintNftWithMetadata,
    MintNftWithUrl,
    NftAddressBalance,
    NftTokenDetail,
    NftTransaction,
    to_body,
)
from ..registry import CollaboratorKind, ScopedRegistry
from ..response import ResponseDto, to_error_response, try_fail

logger = logging.getLogger(__name__)

NFT_TOKEN_TYPES = "nft,multitoken"


def _ipfs_url(ipfs_hash: str) -> str:
    return f"ipfs://{ipfs_hash}"


async def _deploy(
    connector: Connector, network: str, body: Any, contract_type: str
) -> ResponseDto[dict[str, str]]:
    return await try_fail(
        lambda: connector.post(
            "contract/deploy",
            body={**to_body(body), "chain": network, "contractType": contract_type},
        )
    )


class NftTezos:
    """NFT operations on Tezos (TZIP-12 collections)."""

    def __init__(self, instance_id: str, registry: ScopedRegistry) -> None:
        self.id = instance_id
        self._config: TatumConfig = registry.resolve(instance_id, CollaboratorKind.CONFIG)
        self._connector: Connector = registry.resolve(instance_id, CollaboratorKind.CONNECTOR)

    async def create_nft_collection(
        self, body: CreateNftCollectionBase
    ) -> ResponseDto[dict[str, str]]:
        """Deploy a TZIP-12 collection owned (and minted) by ``body.owner``.

        The deployment is paid for by Tatum. Returns ``{"txId": ...}``; the
        contract address is known once the transaction is included in a block.
        """
        return await _deploy(self._connector, self._config.network, body, "nft")


class Nft:
    """NFT operations on EVM-compatible chains (ERC-721 / ERC-1155)."""

    def __init__(self, instance_id: str, registry: ScopedRegistry) -> None:
        self.id = instance_id
        self._config: TatumConfig = registry.resolve(instance_id, CollaboratorKind.CONFIG)
        self._connector: Connector = registry.resolve(instance_id, CollaboratorKind.CONNECTOR)
        self._ipfs: Uploader = registry.resolve(instance_id, CollaboratorKind.IPFS)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_nft_collection(
        self, body: CreateNftEvmCollection
    ) -> ResponseDto[dict[str, str]]:
        """Deploy an ERC-721 collection. The owner is the default minter.

        No funds are needed on the owner address; the deployment is paid for
        by Tatum. Returns ``{"txId": ...}`` of the deployment transaction.
        """
        return await _deploy(self._connector, self._config.network, body, "nft")

    async def create_multi_token_nft_collection(
        self, body: CreateMultiTokenNftCollection
    ) -> ResponseDto[dict[str, str]]:
        """Deploy an ERC-1155 collection. Returns ``{"txId": ...}``."""
        return await _deploy(self._connector, self._config.network, body, "multitoken")

    async def mint_nft(self, body: MintNftWithUrl) -> ResponseDto[dict[str, str]]:
        """Mint an ERC-721 token pointing at ``body.url``."""
        return await try_fail(
            lambda: self._connector.post(
                "contract/erc721/mint",
                body={**to_body(body), "chain": self._config.network},
            )
        )

    async def mint_nft_with_metadata(
        self, body: MintNftWithMetadata
    ) -> ResponseDto[dict[str, str]]:
        """Upload the file and its metadata to IPFS, then mint.

        Steps run in order and stop at the first failed upload; uploads that
        already succeeded are not undone.
        """
        image_upload = await self._ipfs.upload_file(body.file)
        if image_upload.error:
            logger.warning("Image upload failed, mint aborted")
            return to_error_response(image_upload.error)

        metadata = {**body.metadata, "image": _ipfs_url(image_upload.data["ipfsHash"])}
        metadata_upload = await self._ipfs.upload_file(json.dumps(metadata).encode())
        if metadata_upload.error:
            logger.warning("Metadata upload failed, mint aborted")
            return to_error_response(metadata_upload.error)

        return await try_fail(
            lambda: self._connector.post(
                "contract/erc721/mint",
                body={
                    **to_body(body, exclude=("file", "metadata")),
                    "url": _ipfs_url(metadata_upload.data["ipfsHash"]),
                    "chain": self._config.network,
                },
            )
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_balance(
        self, filters: AddressBalanceFilters
    ) -> ResponseDto[list[NftAddressBalance]]:
        """Get NFT balances of one or more addresses."""

        async def fetch() -> list[NftAddressBalance]:
            response = await self._connector.get(
                "data/wallet/portfolio",
                params={
                    "pageSize": filters.page_size,
                    "offset": filters.page,
                    "chain": self._config.network,
                    "tokenTypes": NFT_TOKEN_TYPES,
                    "addresses": ",".join(filters.addresses),
                },
            )
            return response["result"]

        return await try_fail(fetch)

    async def get_all_nft_transactions(
        self, query: GetAllNftTransactionsQuery
    ) -> ResponseDto[list[NftTransaction]]:
        """Get transactions of an NFT collection or of a single token."""

        async def fetch() -> list[NftTransaction]:
            response = await self._connector.get(
                "data/transaction/history",
                params={
                    "pageSize": query.page_size,
                    "offset": query.page,
                    "chain": self._config.network,
                    "tokenTypes": NFT_TOKEN_TYPES,
                    "transactionSubtype": query.transaction_type,
                    "tokenAddress": query.token_address,
                    "tokenId": query.token_id,
                    "blockFrom": query.from_block,
                    "blockTo": query.to_block,
                },
            )
            return response["result"]

        return await try_fail(fetch)

    async def get_all_nft_transactions_by_address(
        self, query: GetAllNftTransactionsByAddress
    ) -> ResponseDto[list[NftTransaction]]:
        """Get NFT transactions of one or more addresses."""

        async def fetch() -> list[NftTransaction]:
            response = await self._connector.get(
                "data/transaction/history",
                params={
                    "pageSize": query.page_size,
                    "offset": query.page,
                    "chain": self._config.network,
                    "addresses": ",".join(query.addresses),
                    "tokenTypes": NFT_TOKEN_TYPES,
                    "transactionSubtype": query.transaction_type,
                    "tokenAddress": query.token_address,
                    "tokenId": query.token_id,
                    "blockFrom": query.from_block,
                    "blockTo": query.to_block,
                },
            )
            return response["result"]

        return await try_fail(fetch)

    async def get_nft_metadata(
        self, query: GetNftMetadata
    ) -> ResponseDto[NftTokenDetail | None]:
        """Get metadata of a single token; ``data`` is None when unknown."""

        async def fetch() -> NftTokenDetail | None:
            response = await self._connector.get(
                "data/metadata",
                params={
                    "chain": self._config.network,
                    "tokenAddress": query.token_address,
                    "tokenIds": query.token_id,
                },
            )
            if response:
                return response[0]
            return None

        return await try_fail(fetch)

    async def get_nft_owner(self, query: GetTokenOwner) -> ResponseDto[list[str]]:
        return await try_fail(
            lambda: self._connector.get(
                "data/owners",
                params={
                    "chain": self._config.network,
                    "tokenAddress": query.token_address,
                    "tokenId": query.token_id,
                    "pageSize": query.page_size,
                    "offset": query.page,
                },
            )
        )

    async def check_nft_owner(self, query: CheckTokenOwner) -> bool:
        """Check whether ``query.owner`` holds the token.

        Unlike the other operations this returns a bare bool and lets
        connector errors propagate.
        """
        return await self._connector.get(
            "data/owners/address",
            params={
                "chain": self._config.network,
                "tokenAddress": query.token_address,
                "address": query.owner,
                "tokenId": query.token_id,
            },
        )

    async def get_nfts_in_collection(
        self, query: GetCollection
    ) -> ResponseDto[list[NftTokenDetail]]:
        return await try_fail(
            lambda: self._connector.get(
                "data/collections",
                params={
                    "pageSize": query.page_size,
                    "offset": query.page,
                    "chain": self._config.network,
                    "collectionAddresses": query.collection_address,
                    "excludeMetadata": query.exclude_metadata,
                },
            )
        )
