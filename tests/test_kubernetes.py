import json

import pytest

from kubecapy.errors import AppError
from kubecapy.kubernetes import (
    IssueSeverity,
    analyze_cluster,
    load_deployments,
    load_namespaces,
    load_pods,
)


def _pod(name, phase, ready="True", restarts=0, image="nginx:1.25"):
    return {
        "metadata": {"name": name},
        "status": {
            "phase": phase,
            "conditions": [
                {"type": "Initialized", "status": "True"},
                {"type": "Ready", "status": ready},
            ],
            "containerStatuses": [{"restartCount": restarts}],
        },
        "spec": {"containers": [{"image": image}]},
        "usage": {"cpu": "10m", "memory": "64Mi"},
    }


def _deployment(name, ready, desired, strategy="RollingUpdate"):
    return {
        "metadata": {"name": name},
        "status": {"readyReplicas": ready},
        "spec": {
            "replicas": desired,
            "strategy": {"type": strategy},
            "template": {"spec": {"containers": [{"image": "registry.local/app:2.0"}]}},
        },
    }


def _write(root, namespace, filename, items):
    ns = root / namespace
    ns.mkdir(parents=True, exist_ok=True)
    (ns / filename).write_text(json.dumps({"items": items}), encoding="utf-8")


@pytest.fixture
def cluster(tmp_path):
    root = tmp_path / "output"
    _write(root, "web", "pods.json", [_pod("web-a", "Running"), _pod("web-b", "Pending", "False", 3)])
    _write(root, "web", "deployments.json", [_deployment("web", 1, 2), _deployment("api", 0, 1)])
    _write(root, "alpha", "pods.json", [_pod("alpha-a", "Running")])
    (root / "empty").mkdir()
    (root / "notes.txt").write_text("not a namespace", encoding="utf-8")
    return root


def test_load_pods_reads_fields(cluster):
    pods = load_pods("web", cluster)
    assert [p.name for p in pods] == ["web-a", "web-b"]
    first, second = pods
    assert first.status == "Running" and first.ready is True
    assert second.ready is False
    assert first.cpu_usage == "10m"
    assert first.memory_usage == "64Mi"
    assert second.restart_count == "3"
    assert first.image == "nginx:1.25"


def test_load_pods_skips_items_without_name_or_phase(tmp_path):
    _write(tmp_path, "ns", "pods.json", [{"metadata": {"name": "x"}}, {"status": {"phase": "Running"}}])
    assert load_pods("ns", tmp_path) == []


def test_load_pods_missing_optional_fields(tmp_path):
    _write(tmp_path, "ns", "pods.json", [{"metadata": {"name": "x"}, "status": {"phase": "Running"}}])
    (pod,) = load_pods("ns", tmp_path)
    assert pod.ready is False
    assert pod.cpu_usage is None and pod.memory_usage is None
    assert pod.restart_count is None and pod.image is None


def test_load_pods_missing_file_gives_empty(tmp_path):
    assert load_pods("nowhere", tmp_path) == []


def test_load_pods_bad_json_raises(tmp_path):
    (tmp_path / "ns").mkdir()
    (tmp_path / "ns" / "pods.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(AppError) as info:
        load_pods("ns", tmp_path)
    assert str(info.value).startswith("JSON error: ")


def test_load_deployments_reads_fields(cluster):
    deployments = load_deployments("web", cluster)
    assert [d.name for d in deployments] == ["web", "api"]
    web = deployments[0]
    assert (web.ready_replicas, web.desired_replicas) == (1, 2)
    assert web.strategy == "RollingUpdate"
    assert web.image == "registry.local/app:2.0"


def test_load_deployments_missing_counts_default_to_zero(tmp_path):
    _write(tmp_path, "ns", "deployments.json", [{"metadata": {"name": "d"}}])
    (dep,) = load_deployments("ns", tmp_path)
    assert (dep.ready_replicas, dep.desired_replicas) == (0, 0)
    assert dep.strategy is None and dep.image is None


def test_load_namespaces_sorted_dirs_only(cluster):
    namespaces = load_namespaces(cluster)
    assert [ns.name for ns in namespaces] == ["alpha", "empty", "web"]
    counts = {ns.name: (ns.pod_count, ns.deployment_count) for ns in namespaces}
    assert counts["web"] == (2, 2)
    assert counts["empty"] == (0, 0)


def test_load_namespaces_tolerates_broken_files(tmp_path):
    (tmp_path / "ns").mkdir()
    (tmp_path / "ns" / "pods.json").write_text("[[[", encoding="utf-8")
    (ns,) = load_namespaces(tmp_path)
    assert ns.pod_count == 0


def test_load_namespaces_missing_root_raises(tmp_path):
    with pytest.raises(AppError, match="Output directory not found"):
        load_namespaces(tmp_path / "missing")


def test_analyze_cluster_totals_and_issues(cluster):
    analysis = analyze_cluster(cluster)
    assert analysis.total_pods == 3
    assert analysis.total_deployments == 2
    assert analysis.total_issues == sum(len(ns.issues) for ns in analysis.namespaces)

    web = next(ns for ns in analysis.namespaces if ns.name == "web")
    by_component = {issue.component: issue for issue in web.issues}
    assert set(by_component) == {"web-b", "web", "api"}
    assert by_component["web-b"].severity is IssueSeverity.WARNING
    assert by_component["web"].severity is IssueSeverity.WARNING
    assert by_component["api"].severity is IssueSeverity.CRITICAL
    assert by_component["api"].component_type == "Deployment"
    assert all(issue.namespace == "web" for issue in web.issues)
    assert "web-b" in by_component["web-b"].description
    assert "Pending" in by_component["web-b"].description


def test_analyze_cluster_healthy_namespace_has_no_issues(cluster):
    analysis = analyze_cluster(cluster)
    alpha = next(ns for ns in analysis.namespaces if ns.name == "alpha")
    assert alpha.issues == []
    assert [p.name for p in alpha.pods] == ["alpha-a"]


def test_analyze_cluster_missing_root_raises(tmp_path):
    with pytest.raises(AppError):
        analyze_cluster(tmp_path / "missing")