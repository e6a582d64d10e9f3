"""Command-line interface for querying NFT data."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

from .config import TatumConfig, config_from_env, load_config
from .logging_setup import configure_logging
from .models import (
    AddressBalanceFilters,
    CheckTokenOwner,
    GetAllNftTransactionsQuery,
    GetCollection,
    GetNftMetadata,
    GetTokenOwner,
)
from .response import ResponseDto
from .sdk import TatumSDK


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page", type=int, default=None, help="Page offset (default: 0)")
    parser.add_argument(
        "--page-size", type=int, default=None, help="Page size (default: 50)"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="tatum-nft",
        description="Query NFT data through the Tatum API",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: read TATUM_* environment variables)",
    )
    parser.add_argument(
        "--instance",
        default=None,
        help="Instance id from config.yaml (default: first configured)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    metadata = sub.add_parser("metadata", help="Metadata of a single NFT")
    metadata.add_argument("token_address")
    metadata.add_argument("token_id")

    owners = sub.add_parser("owners", help="Owners of a single NFT")
    owners.add_argument("token_address")
    owners.add_argument("token_id")
    _add_paging(owners)

    check = sub.add_parser("check-owner", help="Check whether an address owns an NFT")
    check.add_argument("token_address")
    check.add_argument("token_id")
    check.add_argument("owner")

    balance = sub.add_parser("balance", help="NFT balances of addresses")
    balance.add_argument("addresses", nargs="+")
    _add_paging(balance)

    txs = sub.add_parser("transactions", help="Transactions of an NFT collection")
    txs.add_argument("token_address")
    txs.add_argument("--token-id", default=None)
    txs.add_argument("--from-block", type=int, default=None)
    txs.add_argument("--to-block", type=int, default=None)
    _add_paging(txs)

    collection = sub.add_parser("collection", help="NFTs in a collection")
    collection.add_argument("collection_address")
    collection.add_argument("--exclude-metadata", action="store_true")
    _add_paging(collection)

    return parser


def _paging(args: argparse.Namespace) -> dict[str, int]:
    """Only pass paging values the user actually set."""
    paging: dict[str, int] = {}
    if args.page is not None:
        paging["page"] = args.page
    if args.page_size is not None:
        paging["page_size"] = args.page_size
    return paging


def _resolve_config(args: argparse.Namespace) -> tuple[str | None, TatumConfig]:
    if args.config is None:
        return args.instance, config_from_env()

    app_config = load_config(args.config)
    instance_id = args.instance or next(iter(app_config.instances))
    if instance_id not in app_config.instances:
        raise ValueError(f"Unknown instance '{instance_id}'")
    return instance_id, app_config.instances[instance_id]


def _render(result: ResponseDto[Any]) -> str:
    return json.dumps(
        {
            "status": result.status.value,
            "data": result.data,
            "error": asdict(result.error) if result.error else None,
        },
        indent=2,
    )


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command and return the exit code."""
    configure_logging(args.log_level)
    instance_id, config = _resolve_config(args)
    sdk = TatumSDK.init(config, instance_id=instance_id)

    try:
        if args.command == "check-owner":
            owned = await sdk.nft.check_nft_owner(
                CheckTokenOwner(
                    token_address=args.token_address,
                    token_id=args.token_id,
                    owner=args.owner,
                )
            )
            print(json.dumps(owned))
            return 0

        if args.command == "metadata":
            result = await sdk.nft.get_nft_metadata(
                GetNftMetadata(token_address=args.token_address, token_id=args.token_id)
            )
        elif args.command == "owners":
            result = await sdk.nft.get_nft_owner(
                GetTokenOwner(
                    token_address=args.token_address,
                    token_id=args.token_id,
                    **_paging(args),
                )
            )
        elif args.command == "balance":
            result = await sdk.nft.get_balance(
                AddressBalanceFilters(addresses=tuple(args.addresses), **_paging(args))
            )
        elif args.command == "transactions":
            result = await sdk.nft.get_all_nft_transactions(
                GetAllNftTransactionsQuery(
                    token_address=args.token_address,
                    token_id=args.token_id,
                    from_block=args.from_block,
                    to_block=args.to_block,
                    **_paging(args),
                )
            )
        elif args.command == "collection":
            result = await sdk.nft.get_nfts_in_collection(
                GetCollection(
                    collection_address=args.collection_address,
                    exclude_metadata=args.exclude_metadata,
                    **_paging(args),
                )
            )
        else:
            build_parser().print_help()
            return 1
    finally:
        sdk.destroy()

    print(_render(result))
    return 1 if result.is_error else 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
