"""kubetest-aks - Azure Kubernetes Service deployer for cluster-test harnesses.

Example:

    from kubetest_aks import new

    deployer, flags = new()
    args = argparse.ArgumentParser(parents=[flags]).parse_args(
        ["--resource-group", "e2e-rg", "--template", "cluster.bicep"],
    )
    deployer.apply_flags(args)

    deployer.up()            # KUBECONFIG now points at the new cluster
    ...
    deployer.down()
"""

from loguru import logger

from kubetest_aks.aks import NAME, AKSDeployer, AzureCLI, ClusterOptions, ClusterState, new
from kubetest_aks.api import Deployer, NewDeployer
from kubetest_aks.errors import (
    ConfigurationError,
    DeployerError,
    ExecError,
    NotFoundError,
    ParseError,
    UnimplementedError,
)

__version__ = "0.1.0"

# Silent until flags are applied
logger.disable("kubetest_aks")

__all__ = [
    "NAME",
    "AKSDeployer",
    "AzureCLI",
    "ClusterOptions",
    "ClusterState",
    "ConfigurationError",
    "Deployer",
    "DeployerError",
    "ExecError",
    "NewDeployer",
    "NotFoundError",
    "ParseError",
    "UnimplementedError",
    "new",
]
