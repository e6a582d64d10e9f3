"""Service modules"""
from .ipfs import Ipfs
from .nft import Nft, NftTezos

__all__ = ["Ipfs", "Nft", "NftTezos"]
