from __future__ import annotations

from dataclasses import dataclass, field

from kubetest_aks.exec import Runner, run_with_error_output


@dataclass(frozen=True, slots=True)
class AzureCLI:
    """Thin wrappers over the ``az`` commands the deployer needs.

    Each method returns the command's standard output and lets
    :class:`~kubetest_aks.errors.ExecError` propagate unchanged. The CLI
    must be on ``PATH`` and already logged in.
    """

    binary: str = "az"
    runner: Runner = field(default=run_with_error_output, repr=False)

    def _run(self, *args: str) -> bytes:
        return self.runner([self.binary, *args])

    def submit_deployment(self, group: str, template: str) -> bytes:
        return self._run("deployment", "group", "create", "-g", group, "-f", template)

    def dry_run_deployment(self, group: str, template: str) -> bytes:
        return self._run(
            "deployment", "group", "create", "-w", "-r", "ResourceIdOnly",
            "-g", group, "-f", template,
        )

    def show_resource(self, resource_id: str) -> bytes:
        return self._run("resource", "show", "--ids", resource_id)

    def delete_resource(self, resource_id: str) -> bytes:
        return self._run("resource", "delete", "--ids", resource_id)

    def get_credentials(self, group: str, name: str) -> bytes:
        return self._run("aks", "get-credentials", "-g", group, "-n", name, "-f", "-")
