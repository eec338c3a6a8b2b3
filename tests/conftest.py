from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

import pytest

from kubetest_aks.errors import ExecError

CLUSTER_ID = (
    "/subscriptions/S/resourcegroups/rg1/providers/"
    "Microsoft.ContainerService/managedClusters/c1"
)

DEPLOYMENT_OUTPUT = (
    b'{"properties":{"outputResources":[{"id":"' + CLUSTER_ID.encode()
    + b'","resourceGroup":"rg1"}]}}'
)

WHAT_IF_OUTPUT = (
    b"Note: The result may contain false positive predictions (noise).\n"
    b"\n"
    b"Resource and property changes are indicated with this symbol:\n"
    b"  + Create\n"
    b"\n"
    b"The deployment will update the following scope:\n"
    b"\n"
    b"Scope: /subscriptions/S/resourceGroups/rg1\n"
    b"\n"
    b"  + Microsoft.ContainerService/managedClusters/c1\n"
    b"\n"
    b"Resource changes: 1 to create.\n"
)


def _operation(argv: Sequence[str]) -> str:
    match list(argv[1:]):
        case ["deployment", "group", "create", "-w", *_]:
            return "what-if"
        case ["deployment", "group", "create", *_]:
            return "deploy"
        case ["resource", "show", *_]:
            return "show"
        case ["resource", "delete", *_]:
            return "delete"
        case ["aks", "get-credentials", *_]:
            return "credentials"
        case _:
            raise AssertionError(f"unexpected command: {argv}")


class FakeAz:
    """Stands in for the ``az`` binary.

    ``responses`` maps an operation name to the stdout bytes to return, or
    to an exception to raise. Every call is recorded in ``calls``.
    """

    def __init__(self, **responses: bytes | Exception) -> None:
        self.responses = {k.replace("_", "-"): v for k, v in responses.items()}
        self.calls: list[list[str]] = []

    def __call__(self, argv: Sequence[str]) -> bytes:
        self.calls.append(list(argv))
        response = self.responses.get(_operation(argv), b"")
        if isinstance(response, Exception):
            raise response
        return response

    def ops(self) -> list[str]:
        return [_operation(argv) for argv in self.calls]


def az_failure(stderr: str = "ERROR: (ResourceNotFound)") -> ExecError:
    return ExecError(["az"], stderr, "exit status 3")


@pytest.fixture
def make_az() -> type[FakeAz]:
    return FakeAz


@pytest.fixture
def az_error():
    return az_failure


@pytest.fixture
def cluster_id() -> str:
    return CLUSTER_ID


@pytest.fixture
def deployment_output() -> bytes:
    return DEPLOYMENT_OUTPUT


@pytest.fixture
def what_if_output() -> bytes:
    return WHAT_IF_OUTPUT


@pytest.fixture(autouse=True)
def _isolated_kubeconfig(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("KUBECONFIG", raising=False)
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
