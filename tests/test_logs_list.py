import pytest

from kubecapy.app import App
from kubecapy.ui.logs_list import FOOTER, build_logs_list, determine_component_type


@pytest.fixture
def root(tmp_path):
    root = tmp_path / "output"
    (root / "default").mkdir(parents=True)
    return root


@pytest.mark.parametrize(
    "name, expected",
    [
        ("mypod", "Pod"),
        ("coredns-abc-123", "Pod"),
        ("web-deploy", "Deployment"),
        ("svc", "Service"),
        ("my-service", "Service"),
        ("cert-manager", "Manager"),
        ("controller", "Controller"),
        ("operator", "Operator"),
        ("nginx", "Component"),
    ],
)
def test_determine_component_type(name, expected):
    assert determine_component_type(name) == expected


def test_components_with_logs_are_listed(root):
    for name in ("coredns-abc-123", "nginx"):
        (root / "default" / name).mkdir()
        (root / "default" / name / "logs.txt").write_text("hello\n")
    (root / "default" / "empty").mkdir()
    app = App(root)
    app.selected_namespace = "default"
    view = build_logs_list(app)
    rows = view.sections[0][1]
    texts = [row.text for row in rows]
    assert len(texts) == 2
    assert any("Pod: coredns-abc-123" in text for text in texts)
    assert any("Component: nginx" in text for text in texts)
    assert view.selectable_count() == 2


def test_direct_log_files_fallback(root):
    (root / "default" / "pods.json").write_text("{}")
    (root / "default" / "readme.md").write_text("x")
    app = App(root)
    app.selected_namespace = "default"
    rows = build_logs_list(app).sections[0][1]
    assert [row.text for row in rows] == ["📄 Log File: pods"]
    assert not rows[0].selectable


def test_help_when_nothing_found(root):
    app = App(root)
    app.selected_namespace = "default"
    rows = build_logs_list(app).sections[0][1]
    assert rows[0].text == "No log sources found in this namespace"
    assert rows[-1].text.startswith("Checked directory: ")
    assert rows[-1].text.endswith("/default/")


def test_help_without_namespace(root):
    app = App(root)
    view = build_logs_list(app)
    rows = view.sections[0][1]
    assert view.title[0].text == "📋 Available Logs"
    assert not any(row.text.startswith("Checked directory") for row in rows)
    assert view.footer == FOOTER


def test_first_row_selected(root):
    (root / "default" / "nginx").mkdir()
    (root / "default" / "nginx" / "log.txt").write_text("x\n")
    app = App(root)
    app.selected_namespace = "default"
    rows = build_logs_list(app).sections[0][1]
    assert rows[0].selected and rows[0].bold