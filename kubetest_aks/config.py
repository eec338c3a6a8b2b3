"""TOML-based flag defaults.

Loads ~/.kubetest2/aks.toml (global) and kubetest2-aks.toml (project),
merges them, and resolves the ``[cluster]`` and ``[logging]`` tables into
defaults for the deployer's flags. Flags given on the command line win.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeAlias

from kubetest_aks.aks.options import ClusterOptions
from kubetest_aks.errors import ConfigurationError
from kubetest_aks.observability.logging import LOG_LEVELS

RawConfig: TypeAlias = dict[str, Any]

GLOBAL_CONFIG_PATH = Path.home() / ".kubetest2" / "aks.toml"
PROJECT_CONFIG_NAME = "kubetest2-aks.toml"


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"invalid config file {path}: {e}") from e


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("cluster", {})
    merged.setdefault("logging", {})
    return merged


def cluster_defaults(config: RawConfig) -> dict[str, str]:
    """Map the ``[cluster]`` table onto :class:`ClusterOptions` field names.

    Keys may be spelled like the flag (``resource-group``) or like the
    field (``resource_group``).
    """
    known = {f.name for f in fields(ClusterOptions)}
    defaults: dict[str, str] = {}
    for key, value in config.get("cluster", {}).items():
        name = key.replace("-", "_")
        if name not in known:
            raise ConfigurationError(
                f"Unknown cluster option '{key}'. Valid: {', '.join(sorted(known))}"
            )
        defaults[name] = str(value)
    return defaults


def logging_defaults(config: RawConfig) -> dict[str, Any]:
    raw = config.get("logging", {})
    defaults: dict[str, Any] = {}
    if "level" in raw:
        level = str(raw["level"]).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{raw['level']}'. Valid: {', '.join(LOG_LEVELS)}"
            )
        defaults["log_level"] = level
    if "file" in raw:
        defaults["log_file"] = str(raw["file"])
    return defaults
