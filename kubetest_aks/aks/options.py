"""Cluster options and the command-line flags derived from them."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field, fields
from typing import Any

from kubetest_aks.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ClusterOptions:
    """Configuration of one AKS deployment.

    Args:
        resource_group: Resource group the template is deployed into.
        template: Path to the ARM or Bicep template describing the cluster.
    """

    resource_group: str = field(
        default="",
        metadata={"help": "The resource group to deploy the cluster into"},
    )
    template: str = field(
        default="",
        metadata={"help": "Path to the ARM/Bicep template that defines the cluster"},
    )

    def validate(self) -> None:
        missing = [flag_name(f.name) for f in fields(self) if not getattr(self, f.name)]
        if missing:
            raise ConfigurationError(f"missing required flags: {', '.join(missing)}")


def flag_name(field_name: str) -> str:
    return "--" + field_name.replace("_", "-")


def add_cluster_flags(
    parser: argparse.ArgumentParser,
    defaults: dict[str, Any] | None = None,
) -> None:
    """Register one flag per :class:`ClusterOptions` field on ``parser``."""
    defaults = defaults or {}
    group = parser.add_argument_group("aks cluster")
    for f in fields(ClusterOptions):
        group.add_argument(
            flag_name(f.name),
            dest=f.name,
            type=str,
            default=defaults.get(f.name, f.default),
            help=f.metadata.get("help"),
        )


def options_from_namespace(namespace: argparse.Namespace) -> ClusterOptions:
    values = {
        f.name: getattr(namespace, f.name)
        for f in fields(ClusterOptions)
        if getattr(namespace, f.name, None) is not None
    }
    return ClusterOptions(**values)
