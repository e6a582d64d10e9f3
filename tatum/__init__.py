"""Async client for the Tatum NFT and blockchain-data API."""
from .config import AppConfig, TatumConfig, config_from_env, load_config
from .errors import (
    ApiError,
    RegistryError,
    RemoteError,
    TatumError,
    TransportError,
    ValidationError,
)
from .registry import CollaboratorKind, ScopedRegistry
from .response import ErrorWithMessage, ResponseDto, ResponseStatus
from .sdk import TatumSDK, build_registry, default_registry
from .services import Ipfs, Nft, NftTezos

__all__ = [
    "ApiError",
    "AppConfig",
    "CollaboratorKind",
    "ErrorWithMessage",
    "Ipfs",
    "Nft",
    "NftTezos",
    "RegistryError",
    "RemoteError",
    "ResponseDto",
    "ResponseStatus",
    "ScopedRegistry",
    "TatumConfig",
    "TatumError",
    "TatumSDK",
    "TransportError",
    "ValidationError",
    "build_registry",
    "config_from_env",
    "default_registry",
    "load_config",
]
