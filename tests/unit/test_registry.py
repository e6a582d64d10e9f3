"""Unit tests for the scoped collaborator registry."""
from __future__ import annotations

import pytest

from tatum.config import TatumConfig
from tatum.errors import RegistryError
from tatum.registry import CollaboratorKind, ScopedRegistry


class _Thing:
    def __init__(self, config: TatumConfig) -> None:
        self.config = config


@pytest.fixture()
def reg() -> ScopedRegistry:
    registry = ScopedRegistry()
    registry.register(
        CollaboratorKind.CONNECTOR,
        lambda r, instance_id: _Thing(r.resolve(instance_id, CollaboratorKind.CONFIG)),
    )
    return registry


class TestResolve:
    def test_caches_per_instance(
        self, reg: ScopedRegistry, mainnet_config: TatumConfig
    ) -> None:
        reg.configure("a", mainnet_config)
        first = reg.resolve("a", CollaboratorKind.CONNECTOR)
        assert reg.resolve("a", CollaboratorKind.CONNECTOR) is first

    def test_distinct_instances_never_share(
        self,
        reg: ScopedRegistry,
        mainnet_config: TatumConfig,
        testnet_config: TatumConfig,
    ) -> None:
        reg.configure("main", mainnet_config)
        reg.configure("test", testnet_config)

        main = reg.resolve("main", CollaboratorKind.CONNECTOR)
        test = reg.resolve("test", CollaboratorKind.CONNECTOR)

        assert main is not test
        assert main.config.network == "ethereum"
        assert test.config.network == "ethereum-sepolia"

    def test_factory_is_lazy(self, mainnet_config: TatumConfig) -> None:
        calls: list[str] = []
        registry = ScopedRegistry()
        registry.register(
            CollaboratorKind.CONNECTOR,
            lambda r, instance_id: calls.append(instance_id) or object(),
        )
        registry.configure("a", mainnet_config)
        assert calls == []

        registry.resolve("a", CollaboratorKind.CONNECTOR)
        registry.resolve("a", CollaboratorKind.CONNECTOR)
        assert calls == ["a"]

    def test_unregistered_kind_raises(
        self, reg: ScopedRegistry, mainnet_config: TatumConfig
    ) -> None:
        reg.configure("a", mainnet_config)
        with pytest.raises(RegistryError, match="No factory"):
            reg.resolve("a", CollaboratorKind.IPFS)

    def test_unconfigured_instance_raises(self, reg: ScopedRegistry) -> None:
        with pytest.raises(RegistryError, match="not configured"):
            reg.resolve("ghost", CollaboratorKind.CONNECTOR)

    def test_registry_error_is_lookup_error(self, reg: ScopedRegistry) -> None:
        with pytest.raises(LookupError):
            reg.resolve("ghost", CollaboratorKind.CONFIG)


class TestConfigure:
    def test_last_registration_wins(
        self,
        reg: ScopedRegistry,
        mainnet_config: TatumConfig,
        testnet_config: TatumConfig,
    ) -> None:
        reg.configure("a", mainnet_config)
        stale = reg.resolve("a", CollaboratorKind.CONNECTOR)

        reg.configure("a", testnet_config)
        fresh = reg.resolve("a", CollaboratorKind.CONNECTOR)

        assert reg.resolve("a", CollaboratorKind.CONFIG) is testnet_config
        assert fresh is not stale
        assert fresh.config.network == "ethereum-sepolia"

    def test_config_kind_cannot_get_a_factory(self, reg: ScopedRegistry) -> None:
        with pytest.raises(ValueError):
            reg.register(CollaboratorKind.CONFIG, lambda r, i: None)


class TestTeardown:
    def test_teardown_forgets_only_that_instance(
        self,
        reg: ScopedRegistry,
        mainnet_config: TatumConfig,
        testnet_config: TatumConfig,
    ) -> None:
        reg.configure("main", mainnet_config)
        reg.configure("test", testnet_config)
        reg.resolve("main", CollaboratorKind.CONNECTOR)

        reg.teardown("main")

        assert reg.instance_ids() == ["test"]
        with pytest.raises(RegistryError):
            reg.resolve("main", CollaboratorKind.CONNECTOR)
