"""AKS deployer: maps the harness lifecycle verbs onto ``az`` commands.

``up`` submits the deployment and exports a kubeconfig. ``is_up`` predicts
the cluster id from a what-if preview and checks that it exists. ``down``
deletes the cluster when ``is_up`` finds one, so repeated calls are safe.
The cluster id found by ``up`` or ``is_up`` is cached on the instance for
later verbs in the same process.
"""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path

from loguru import logger

from kubetest_aks.aks.cli import AzureCLI
from kubetest_aks.aks.kubeconfig import write_kubeconfig
from kubetest_aks.aks.options import ClusterOptions, options_from_namespace
from kubetest_aks.aks.parsing import parse_cluster_name, parse_resource_id, parse_what_if
from kubetest_aks.errors import DeployerError, ExecError, NotFoundError, UnimplementedError
from kubetest_aks.observability.logging import (
    LogConfig,
    level_from_verbosity,
    setup_logging,
    teardown_logging,
)

log = logger.bind(component="deployer", deployer="aks")


class ClusterState(Enum):
    UNKNOWN = "unknown"
    UP = "up"
    DOWN = "down"


class AKSDeployer:
    """Deploys a single AKS cluster from a template.

    Not safe to share across threads, and only one instance per process
    should run ``up`` since it writes the process-wide ``KUBECONFIG``.
    """

    def __init__(self, options: ClusterOptions | None = None, cli: AzureCLI | None = None) -> None:
        self.options = options or ClusterOptions()
        self.cli = cli or AzureCLI()
        self.cluster_resource_id: str | None = None
        self.kubeconfig: Path | None = None
        self.state = ClusterState.UNKNOWN
        self._log_handlers: list[int] = []

    def __repr__(self) -> str:
        return (
            f"AKSDeployer(resource_group={self.options.resource_group!r}, "
            f"template={self.options.template!r}, "
            f"cluster_resource_id={self.cluster_resource_id!r}, state={self.state.value})"
        )

    def apply_flags(self, namespace: argparse.Namespace) -> None:
        self.options = options_from_namespace(namespace)

        level = getattr(namespace, "log_level", "INFO")
        if (v := getattr(namespace, "v", None)) is not None:
            level = level_from_verbosity(v)
        teardown_logging(self._log_handlers)
        self._log_handlers = setup_logging(
            LogConfig(level=level, file=getattr(namespace, "log_file", None)),
        )
        log.debug("Flags applied: {options}", options=self.options)

    def up(self) -> None:
        self.options.validate()
        group, template = self.options.resource_group, self.options.template
        log.info("Creating deployment: {d}", d=self)

        try:
            out = self.cli.submit_deployment(group, template)
        except ExecError as e:
            log.error("Failed to create deployment: {err}", err=e)
            raise DeployerError(f"failed to create deployment [{template}]: {e}") from e

        self.cluster_resource_id = parse_resource_id(out)
        log.info("Successful deployment: {id}", id=self.cluster_resource_id)

        cluster_name = parse_cluster_name(self.cluster_resource_id)

        try:
            kubeconfig = self.cli.get_credentials(group, cluster_name)
        except ExecError as e:
            log.error("Failed to get kubeconfig: {err}", err=e)
            raise DeployerError(f"failed to get kubeconfig: {e}") from e

        try:
            self.kubeconfig = write_kubeconfig(group, cluster_name, kubeconfig)
        except OSError as e:
            raise DeployerError(f"failed to write kubeconfig: {e}") from e

        self.state = ClusterState.UP
        log.info("KUBECONFIG set to {path}", path=self.kubeconfig)

    def is_up(self) -> bool:
        self.options.validate()
        group, template = self.options.resource_group, self.options.template

        try:
            out = self.cli.dry_run_deployment(group, template)
        except ExecError as e:
            raise DeployerError(f"failed to query deployment [{template}]: {e}") from e

        # Absent and unknown look the same here; down relies on that.
        try:
            resource_id = parse_what_if(out)
        except NotFoundError as e:
            log.debug("No managed cluster in what-if output: {err}", err=e)
            return False

        try:
            self.cli.show_resource(resource_id)
        except ExecError as e:
            log.info("Cluster does not exist: {err}", err=e)
            return False

        self.cluster_resource_id = resource_id
        self.state = ClusterState.UP
        return True

    def down(self) -> None:
        try:
            up = self.is_up()
        except DeployerError as e:
            raise DeployerError(f"failed to get cluster state: {e}") from e

        if not up:
            log.info("No cluster, skipping down.")
            return

        log.info("Deleting resources: {d}", d=self)
        try:
            self.cli.delete_resource(self.cluster_resource_id)
        except ExecError as e:
            raise DeployerError(f"failed to delete resource: {e}") from e

        self.state = ClusterState.DOWN
        log.info("Deleted resources")

    def dump_cluster_logs(self) -> None:
        raise UnimplementedError("dump_cluster_logs is not implemented for aks")

    def build(self) -> None:
        raise UnimplementedError("build is not implemented for aks")

    def close(self) -> None:
        """Detach the log handlers installed by :meth:`apply_flags`."""
        teardown_logging(self._log_handlers)
        self._log_handlers = []
