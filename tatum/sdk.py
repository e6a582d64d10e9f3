"""Session entry point — wires the registry and exposes the services."""
from __future__ import annotations

import logging
import uuid

from .config import TatumConfig
from .connector import TatumConnector
from .registry import CollaboratorKind, ScopedRegistry
from .services import Ipfs, Nft, NftTezos

logger = logging.getLogger(__name__)

# Factory table keyed by collaborator kind.
_FACTORIES = {
    CollaboratorKind.CONNECTOR: lambda reg, instance_id: TatumConnector(
        reg.resolve(instance_id, CollaboratorKind.CONFIG)
    ),
    CollaboratorKind.IPFS: lambda reg, instance_id: Ipfs(instance_id, reg),
}


def build_registry() -> ScopedRegistry:
    """Return a fresh registry with the standard factories registered."""
    registry = ScopedRegistry()
    for kind, factory in _FACTORIES.items():
        registry.register(kind, factory)
    return registry


default_registry = build_registry()


class TatumSDK:
    """One configured client session.

    Several sessions (e.g. mainnet and testnet) can live side by side; each
    gets its own config and connector from the registry.
    """

    def __init__(self, instance_id: str, registry: ScopedRegistry) -> None:
        self.id = instance_id
        self._registry = registry
        self.config: TatumConfig = registry.resolve(instance_id, CollaboratorKind.CONFIG)
        self.ipfs: Ipfs = registry.resolve(instance_id, CollaboratorKind.IPFS)
        self.nft = Nft(instance_id, registry)
        self.nft_tezos = NftTezos(instance_id, registry)

    @classmethod
    def init(
        cls,
        config: TatumConfig,
        instance_id: str | None = None,
        registry: ScopedRegistry | None = None,
    ) -> TatumSDK:
        """Register ``config`` under ``instance_id`` and open a session."""
        registry = registry or default_registry
        instance_id = instance_id or uuid.uuid4().hex
        registry.configure(instance_id, config)
        logger.info("Initialized Tatum instance %s on %s", instance_id, config.network)
        return cls(instance_id, registry)

    def destroy(self) -> None:
        """Forget this session's config and collaborators."""
        self._registry.teardown(self.id)
        logger.info("Destroyed Tatum instance %s", self.id)
