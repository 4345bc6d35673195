import pytest

from kubecapy.app import App
from kubecapy.kubernetes import (
    ClusterAnalysis,
    DeploymentInfo,
    NamespaceAnalysis,
    PodInfo,
)
from kubecapy.ui.cluster_analysis import build_cluster_analysis, selectable_index
from kubecapy.ui.view import Row, Tone


@pytest.fixture
def app(tmp_path):
    return App(tmp_path)


def _analysis():
    alpha = NamespaceAnalysis(
        name="alpha",
        pods=[
            PodInfo(name="web-1", status="Running", ready=True),
            PodInfo(name="web-2", status="Pending", ready=False),
        ],
        deployments=[DeploymentInfo(name="web", ready_replicas=1, desired_replicas=2)],
    )
    empty = NamespaceAnalysis(name="empty")
    beta = NamespaceAnalysis(
        name="beta",
        deployments=[DeploymentInfo(name="db", ready_replicas=1, desired_replicas=1)],
    )
    return ClusterAnalysis(
        namespaces=[alpha, empty, beta], total_pods=2, total_deployments=2, total_issues=2
    )


def _rows(view):
    assert len(view.sections) == 1
    return view.sections[0][1]


def test_without_analysis_shows_loading(app):
    view = build_cluster_analysis(app)
    rows = _rows(view)
    assert [row.text for row in rows] == ["Loading cluster analysis..."]
    assert view.selectable_count() == 0


def test_rows_follow_namespaces_in_order(app):
    app.cluster_analysis = _analysis()
    rows = _rows(build_cluster_analysis(app))
    texts = [row.text for row in rows]
    assert texts[0].startswith("📁 Namespace: alpha")
    assert texts[1] == "  🟢 Pod: web-1 (Running)"
    assert texts[2] == "  🔴 Pod: web-2 (Pending)"
    assert texts[3] == "  🟡 Deployment: web (1/2)"
    assert texts[4] == ""
    assert texts[5].startswith("📁 Namespace: empty")
    assert texts[6].startswith("📁 Namespace: beta")
    assert texts[7] == "  🟢 Deployment: db (1/1)"
    assert len(texts) == 8


def test_trailing_blank_line_is_removed(app):
    app.cluster_analysis = _analysis()
    rows = _rows(build_cluster_analysis(app))
    assert rows[-1].text != ""
    assert rows[-1].selectable


def test_selectable_rows_match_components(app):
    analysis = _analysis()
    app.cluster_analysis = analysis
    view = build_cluster_analysis(app)
    expected = sum(len(ns.pods) + len(ns.deployments) for ns in analysis.namespaces)
    assert view.selectable_count() == expected


def test_headers_are_gray_italic(app):
    app.cluster_analysis = _analysis()
    rows = _rows(build_cluster_analysis(app))
    headers = [row for row in rows if row.text.startswith("📁")]
    assert len(headers) == 3
    assert all(row.tone is Tone.GRAY and row.italic and not row.selectable for row in headers)


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_exactly_selected_component_is_highlighted(app, index):
    app.cluster_analysis = _analysis()
    app.list_index = index
    rows = _rows(build_cluster_analysis(app))
    selected = [i for i, row in enumerate(rows) if row.selected]
    assert len(selected) == 1
    assert selectable_index(rows, selected[0]) == index
    assert rows[selected[0]].bold


def test_missing_selection_defaults_to_first(app):
    app.cluster_analysis = _analysis()
    app.list_index = None
    rows = _rows(build_cluster_analysis(app))
    assert [row.text for row in rows if row.selected] == ["  🟢 Pod: web-1 (Running)"]


def test_selectable_index_counts_preceding_selectables(app):
    app.cluster_analysis = _analysis()
    rows = _rows(build_cluster_analysis(app))
    positions = [selectable_index(rows, i) for i, row in enumerate(rows) if row.selectable]
    assert positions == list(range(len(positions)))


def test_selectable_index_out_of_range_is_zero():
    rows = [Row("a", selectable=True), Row("b", selectable=True)]
    assert selectable_index(rows, 5) == 0
    assert selectable_index(rows, 1) == 1