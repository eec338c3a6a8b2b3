"""Error kinds raised by the AKS deployer.

Every error derives from :class:`DeployerError` so the harness can catch
deployer failures with one clause. Lower layers raise the specific kinds;
the deployer verbs wrap them with a short prefix and chain the original
with ``raise ... from``.
"""

from __future__ import annotations

from collections.abc import Sequence


class DeployerError(Exception):
    pass


class ExecError(DeployerError):
    """An external command failed to spawn or exited nonzero.

    ``str()`` renders the captured standard error followed by the cause,
    matching what the harness prints in its log stream.
    """

    def __init__(self, argv: Sequence[str], stderr: str, cause: object) -> None:
        self.argv = tuple(argv)
        self.stderr = stderr
        self.cause = cause
        super().__init__(f"{stderr} : {cause}")


class ParseError(DeployerError, ValueError):
    pass


class NotFoundError(DeployerError, LookupError):
    pass


class UnimplementedError(DeployerError, NotImplementedError):
    pass


class ConfigurationError(DeployerError):
    pass
