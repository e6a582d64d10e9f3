"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.tatum.io"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TatumConfig:
    network: str = ""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    version: str = "v4"
    ipfs_version: str = "v3"
    timeout: int = 30
    verbose: bool = False


@dataclass(frozen=True)
class AppConfig:
    instances: dict[str, TatumConfig] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_tatum(raw: dict[str, Any]) -> TatumConfig:
    return TatumConfig(
        network=str(raw.get("network", "")),
        api_key=str(raw.get("api_key", "")),
        base_url=str(raw.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        version=str(raw.get("version", "v4")),
        ipfs_version=str(raw.get("ipfs_version", "v3")),
        timeout=int(raw.get("timeout", 30)),
        verbose=_as_bool(raw.get("verbose", False)),
    )


def _build_instances(raw: dict[str, Any]) -> dict[str, TatumConfig]:
    instances: dict[str, TatumConfig] = {}
    for instance_id, cfg in raw.items():
        instances[str(instance_id)] = _build_tatum(cfg or {})
    return instances


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate client configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            current working directory.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path.cwd() / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(instances=_build_instances(raw.get("instances", {})))

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def config_from_env(prefix: str = "TATUM_") -> TatumConfig:
    """Build a single config from ``TATUM_*`` environment variables."""
    load_dotenv()

    raw = {
        key[len(prefix):].lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix)
    }
    cfg = _build_tatum(raw)
    _validate_instance("env", cfg)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.instances:
        raise ValueError("At least one instance must be configured")

    for instance_id, instance in cfg.instances.items():
        _validate_instance(instance_id, instance)


def _validate_instance(instance_id: str, cfg: TatumConfig) -> None:
    if not cfg.network:
        raise ValueError(f"Instance '{instance_id}' has no network")
    if cfg.timeout <= 0:
        raise ValueError(
            f"Instance '{instance_id}' has invalid timeout {cfg.timeout}"
        )
