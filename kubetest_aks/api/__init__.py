from kubetest_aks.api.deployer import Deployer, NewDeployer

__all__ = ["Deployer", "NewDeployer"]
