"""AKS deployer for the cluster-test harness.

Example::

    from kubetest_aks.aks import new

    deployer, flags = new()
    parser = argparse.ArgumentParser(parents=[flags])
    deployer.apply_flags(parser.parse_args())
    deployer.up()
"""

from __future__ import annotations

import argparse
from pathlib import Path

from kubetest_aks.aks.cli import AzureCLI
from kubetest_aks.aks.deployer import AKSDeployer, ClusterState
from kubetest_aks.aks.options import ClusterOptions, add_cluster_flags
from kubetest_aks.config import cluster_defaults, load_config, logging_defaults
from kubetest_aks.observability.logging import LOG_LEVELS

NAME = "aks"


def _add_logging_flags(parser: argparse.ArgumentParser, defaults: dict) -> None:
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=defaults.get("log_level", "INFO"),
        help="Minimum level of deployer log output",
    )
    group.add_argument(
        "--v",
        type=int,
        default=None,
        help="klog-style verbosity; overrides --log-level when set",
    )
    group.add_argument(
        "--log-file",
        default=defaults.get("log_file"),
        help="Also write deployer logs to this file",
    )


def bind_flags(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> argparse.ArgumentParser:
    """Build the deployer's flag set, seeded with TOML defaults."""
    config = load_config(project_dir=project_dir, global_path=global_path)
    parser = argparse.ArgumentParser(prog=f"kubetest2-{NAME}", add_help=False)
    add_cluster_flags(parser, cluster_defaults(config))
    _add_logging_flags(parser, logging_defaults(config))
    return parser


def new(opts: object | None = None) -> tuple[AKSDeployer, argparse.ArgumentParser]:
    """Create an unconfigured deployer and the flags that configure it.

    ``opts`` is the harness's own options object; the AKS deployer does not
    read it.
    """
    deployer = AKSDeployer(ClusterOptions(template=""))
    return deployer, bind_flags()


__all__ = [
    "NAME",
    "AKSDeployer",
    "AzureCLI",
    "ClusterOptions",
    "ClusterState",
    "bind_flags",
    "new",
]
