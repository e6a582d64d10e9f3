"""Scoped collaborator registry keyed by instance id."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from .config import TatumConfig
from .errors import RegistryError

logger = logging.getLogger(__name__)


class CollaboratorKind(str, Enum):
    CONFIG = "config"
    CONNECTOR = "connector"
    IPFS = "ipfs"


Factory = Callable[["ScopedRegistry", str], Any]


class ScopedRegistry:
    """Lazily build and cache collaborators per ``(instance_id, kind)``.

    Each instance id owns its own config and collaborators; two ids never
    share an instance. Factories are looked up in an explicit table filled by
    :meth:`register`.
    """

    def __init__(self) -> None:
        self._factories: dict[CollaboratorKind, Factory] = {}
        self._instances: dict[tuple[str, CollaboratorKind], Any] = {}

    def register(self, kind: CollaboratorKind, factory: Factory) -> None:
        if kind is CollaboratorKind.CONFIG:
            raise ValueError("Config is set per instance with configure()")
        self._factories[kind] = factory

    def configure(self, instance_id: str, config: TatumConfig) -> None:
        """Set the config for ``instance_id``; the last call wins."""
        self.teardown(instance_id)
        self._instances[(instance_id, CollaboratorKind.CONFIG)] = config
        logger.debug("Configured instance %s (network=%s)", instance_id, config.network)

    def resolve(self, instance_id: str, kind: CollaboratorKind) -> Any:
        key = (instance_id, kind)
        if key in self._instances:
            return self._instances[key]

        if kind is CollaboratorKind.CONFIG:
            raise RegistryError(f"Instance '{instance_id}' is not configured")

        factory = self._factories.get(kind)
        if factory is None:
            raise RegistryError(f"No factory registered for '{kind.value}'")

        # Fails fast when the instance itself is unknown.
        self.resolve(instance_id, CollaboratorKind.CONFIG)

        collaborator = factory(self, instance_id)
        self._instances[key] = collaborator
        logger.debug("Built %s for instance %s", kind.value, instance_id)
        return collaborator

    def teardown(self, instance_id: str) -> None:
        for key in [k for k in self._instances if k[0] == instance_id]:
            del self._instances[key]

    def instance_ids(self) -> list[str]:
        return [
            instance_id
            for instance_id, kind in self._instances
            if kind is CollaboratorKind.CONFIG
        ]

