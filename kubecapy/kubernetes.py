"""Loading pods, deployments and namespaces from a cluster dump on disk."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from kubecapy.errors import AppError

DEFAULT_ROOT = Path("output")

_U32_MASK = 0xFFFFFFFF


@dataclass
class NamespaceInfo:
    name: str
    pod_count: int
    deployment_count: int


@dataclass
class PodInfo:
    name: str
    status: str
    ready: bool
    cpu_usage: str | None = None
    memory_usage: str | None = None
    restart_count: str | None = None
    image: str | None = None


@dataclass
class DeploymentInfo:
    name: str
    ready_replicas: int
    desired_replicas: int
    strategy: str | None = None
    image: str | None = None


class IssueSeverity(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ClusterIssue:
    severity: IssueSeverity
    component: str
    component_type: str
    namespace: str
    description: str


@dataclass
class NamespaceAnalysis:
    name: str
    pods: list[PodInfo] = field(default_factory=list)
    deployments: list[DeploymentInfo] = field(default_factory=list)
    issues: list[ClusterIssue] = field(default_factory=list)


@dataclass
class ClusterAnalysis:
    namespaces: list[NamespaceAnalysis]
    total_pods: int
    total_deployments: int
    total_issues: int


def _get(value: Any, *keys: str) -> Any:
    """Walk nested objects, yielding None wherever a key is missing."""
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _uint(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as error:
        raise AppError.from_os_error(error) from error
    try:
        return json.loads(content)
    except ValueError as error:
        raise AppError.from_json_error(error) from error


def _items(data: Any) -> list[Any]:
    items = _get(data, "items")
    return items if isinstance(items, list) else []


def _pod_ready(pod: Any) -> bool:
    conditions = _get(pod, "status", "conditions")
    if not isinstance(conditions, list):
        return False
    ready = next((c for c in conditions if _get(c, "type") == "Ready"), None)
    if ready is None:
        return False
    return _str(_get(ready, "status")) == "True"


def load_pods(namespace: str, root: str | Path = DEFAULT_ROOT) -> list[PodInfo]:
    """Read the pods of a namespace from ``<root>/<namespace>/pods.json``."""
    pods_file = Path(root) / namespace / "pods.json"
    if not pods_file.exists():
        return []

    pods = []
    for pod in _items(_read_json(pods_file)):
        name = _str(_get(pod, "metadata", "name"))
        status = _str(_get(pod, "status", "phase"))
        if name is None or status is None:
            continue
        restarts = _uint(_get(_first(_get(pod, "status", "containerStatuses")), "restartCount"))
        pods.append(
            PodInfo(
                name=name,
                status=status,
                ready=_pod_ready(pod),
                cpu_usage=_str(_get(pod, "usage", "cpu")),
                memory_usage=_str(_get(pod, "usage", "memory")),
                restart_count=None if restarts is None else str(restarts),
                image=_str(_get(_first(_get(pod, "spec", "containers")), "image")),
            )
        )
    return pods


def load_deployments(namespace: str, root: str | Path = DEFAULT_ROOT) -> list[DeploymentInfo]:
    """Read the deployments of a namespace from ``<root>/<namespace>/deployments.json``."""
    deployments_file = Path(root) / namespace / "deployments.json"
    if not deployments_file.exists():
        return []

    deployments = []
    for deployment in _items(_read_json(deployments_file)):
        name = _str(_get(deployment, "metadata", "name"))
        if name is None:
            continue
        ready = _uint(_get(deployment, "status", "readyReplicas")) or 0
        desired = _uint(_get(deployment, "spec", "replicas")) or 0
        containers = _get(deployment, "spec", "template", "spec", "containers")
        deployments.append(
            DeploymentInfo(
                name=name,
                ready_replicas=ready & _U32_MASK,
                desired_replicas=desired & _U32_MASK,
                strategy=_str(_get(deployment, "spec", "strategy", "type")),
                image=_str(_get(_first(containers), "image")),
            )
        )
    return deployments


def _pods_or_empty(namespace: str, root: Path) -> list[PodInfo]:
    try:
        return load_pods(namespace, root)
    except AppError:
        return []


def _deployments_or_empty(namespace: str, root: Path) -> list[DeploymentInfo]:
    try:
        return load_deployments(namespace, root)
    except AppError:
        return []


def load_namespaces(root: str | Path = DEFAULT_ROOT) -> list[NamespaceInfo]:
    """List every namespace directory under ``root``, sorted by name."""
    root = Path(root)
    if not root.exists():
        raise AppError("Output directory not found")

    try:
        entries = [entry for entry in root.iterdir() if entry.is_dir()]
    except OSError as error:
        raise AppError.from_os_error(error) from error

    namespaces = [
        NamespaceInfo(
            name=entry.name,
            pod_count=len(_pods_or_empty(entry.name, root)),
            deployment_count=len(_deployments_or_empty(entry.name, root)),
        )
        for entry in entries
    ]
    namespaces.sort(key=lambda ns: ns.name)
    return namespaces


def _namespace_issues(
    namespace: str, pods: list[PodInfo], deployments: list[DeploymentInfo]
) -> list[ClusterIssue]:
    issues = [
        ClusterIssue(
            severity=IssueSeverity.WARNING,
            component=pod.name,
            component_type="Pod",
            namespace=namespace,
            description=(
                f"Pod {pod.name} is not ready or not running (status: {pod.status})"
            ),
        )
        for pod in pods
        if not pod.ready or pod.status != "Running"
    ]
    issues.extend(
        ClusterIssue(
            severity=(
                IssueSeverity.CRITICAL if dep.ready_replicas == 0 else IssueSeverity.WARNING
            ),
            component=dep.name,
            component_type="Deployment",
            namespace=namespace,
            description=(
                f"Deployment {dep.name} has "
                f"{dep.ready_replicas}/{dep.desired_replicas} replicas ready"
            ),
        )
        for dep in deployments
        if dep.ready_replicas != dep.desired_replicas
    )
    return issues


def analyze_cluster(root: str | Path = DEFAULT_ROOT) -> ClusterAnalysis:
    """Load every namespace and collect the issues found in its pods and deployments."""
    root = Path(root)
    analyses = []
    for namespace in load_namespaces(root):
        pods = _pods_or_empty(namespace.name, root)
        deployments = _deployments_or_empty(namespace.name, root)
        analyses.append(
            NamespaceAnalysis(
                name=namespace.name,
                pods=pods,
                deployments=deployments,
                issues=_namespace_issues(namespace.name, pods, deployments),
            )
        )

    return ClusterAnalysis(
        namespaces=analyses,
        total_pods=sum(len(a.pods) for a in analyses),
        total_deployments=sum(len(a.deployments) for a in analyses),
        total_issues=sum(len(a.issues) for a in analyses),
    )