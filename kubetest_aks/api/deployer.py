import argparse
from typing import Protocol, runtime_checkable


@runtime_checkable
class Deployer(Protocol):
    """Lifecycle interface the test harness drives.

    The harness calls at most one verb at a time. Verbs signal failure by
    raising; a verb returning normally has succeeded.
    """

    def up(self) -> None:
        """Provision a new cluster for testing."""
        ...

    def is_up(self) -> bool:
        """Return True if a test cluster is provisioned and reachable."""
        ...

    def down(self) -> None:
        """Tear down the test cluster, if any."""
        ...

    def dump_cluster_logs(self) -> None:
        """Export logs from the cluster. May be called multiple times."""
        ...

    def build(self) -> None:
        """Build kubernetes in whatever format the deployer consumes."""
        ...

    def apply_flags(self, namespace: argparse.Namespace) -> None:
        """Bind parsed flags before any verb runs."""
        ...


class NewDeployer(Protocol):
    """Construction entry point: returns the deployer and its flag set.

    The flag set is an ``add_help=False`` parser meant to be passed to the
    harness's own parser via ``parents=[...]``.
    """

    def __call__(self, opts: object | None = None) -> tuple[Deployer, argparse.ArgumentParser]: ...
