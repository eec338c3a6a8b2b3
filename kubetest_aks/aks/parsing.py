"""Parsers for ``az`` command output.

The what-if preview is human-oriented text; the patterns below track its
format and any drift in that format breaks :func:`parse_what_if`.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from kubetest_aks.errors import NotFoundError, ParseError

MANAGED_CLUSTER_TYPE = "Microsoft.ContainerService/managedClusters"

SCOPE_PATTERN = re.compile(r"Scope: (.+)")
WHAT_IF_CLUSTER_PATTERN = re.compile(r"\+ Microsoft\.ContainerService/managedClusters/(.+)")
RESOURCE_ID_PATTERN = re.compile(
    r"/subscriptions/(.+)/resourcegroups/(.+)/providers/"
    r"Microsoft\.ContainerService/managedClusters/(.+)\Z",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class OutputResource:
    id: str
    resource_group: str | None = None


@dataclass(frozen=True, slots=True)
class ArmDeployment:
    """The part of ``az deployment group create`` output we rely on."""

    output_resources: tuple[OutputResource, ...]

    @classmethod
    def from_json(cls, doc: Any) -> ArmDeployment:
        match doc:
            case {"properties": {"outputResources": list(entries)}}:
                pass
            case {"properties": dict()}:
                entries = []
            case _:
                raise ParseError("deployment output has no properties object")

        resources = []
        for entry in entries:
            match entry:
                case {"id": str(rid), **rest}:
                    group = rest.get("resourceGroup")
                    resources.append(OutputResource(id=rid, resource_group=group))
                case _:
                    raise ParseError(f"output resource without an id: {entry!r}")
        return cls(output_resources=tuple(resources))


def parse_resource_id(data: bytes) -> str:
    """Return the first output resource id of a deployment result."""
    try:
        doc = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"invalid deployment output: {e}") from e

    deployment = ArmDeployment.from_json(doc)
    if not deployment.output_resources:
        raise ParseError("deployment output has no outputResources")
    return deployment.output_resources[0].id


def parse_what_if(data: bytes) -> str:
    """Predict the managed cluster resource id from a what-if preview.

    The most recent ``Scope:`` line seen before the first managed cluster
    line is used as its prefix.
    """
    scope = ""
    for line in data.decode(errors="replace").split("\n"):
        line = line.rstrip("\r")
        if scope_match := SCOPE_PATTERN.search(line):
            scope = scope_match.group(1)
            continue
        if cluster_match := WHAT_IF_CLUSTER_PATTERN.search(line):
            return f"{scope}/{MANAGED_CLUSTER_TYPE}/{cluster_match.group(1)}"
    raise NotFoundError("resourceID not found")


def parse_cluster_name(resource_id: str) -> str:
    """Return the cluster short name, the last segment of ``resource_id``."""
    found = RESOURCE_ID_PATTERN.search(resource_id)
    if found is None or not all(found.groups()):
        raise ParseError(f"invalid cluster resourceID: {resource_id!r}")
    return found.group(3)
