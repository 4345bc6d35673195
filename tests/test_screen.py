import json

import pytest

from kubecapy.app import App, Screen
from kubecapy.logs import ComponentLogs, LogEntry, LogLevel
from kubecapy.ui.capybara import build_capybara
from kubecapy.ui.cluster_analysis import build_cluster_analysis
from kubecapy.ui.component_details import build_component_details
from kubecapy.ui.deployments_list import build_deployments_list
from kubecapy.ui.logs_list import build_logs_list
from kubecapy.ui.logs_viewer import build_logs_viewer
from kubecapy.ui.main_menu import build_main_menu
from kubecapy.ui.namespace_details import build_namespace_details
from kubecapy.ui.namespace_list import build_namespace_list
from kubecapy.ui.pods_list import build_pods_list
from kubecapy.ui.screen import build_view, draw


class FakeScreen:
    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.writes = []
        self.refreshed = False

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.writes.clear()

    def addnstr(self, y, x, text, n, attr=0):
        self.writes.append((y, x, text[:n]))

    def refresh(self):
        self.refreshed = True


@pytest.fixture
def app(tmp_path):
    root = tmp_path / "output"
    ns = root / "default"
    ns.mkdir(parents=True)
    pods = {"items": [{"metadata": {"name": "web-1"}, "status": {"phase": "Running"}}]}
    (ns / "pods.json").write_text(json.dumps(pods), encoding="utf-8")
    return App(root)


@pytest.mark.parametrize(
    "screen, builder",
    [
        (Screen.MAIN_MENU, build_main_menu),
        (Screen.NAMESPACE_LIST, build_namespace_list),
        (Screen.NAMESPACE_DETAILS, build_namespace_details),
        (Screen.CLUSTER_ANALYSIS, build_cluster_analysis),
        (Screen.COMPONENT_DETAILS, build_component_details),
        (Screen.LOGS_LIST, build_logs_list),
        (Screen.LOGS_VIEWER, build_logs_viewer),
        (Screen.CAPYBARA, build_capybara),
        (Screen.PODS_LIST, build_pods_list),
        (Screen.DEPLOYMENTS_LIST, build_deployments_list),
    ],
)
def test_build_view_dispatch(app, screen, builder):
    app.current_screen = screen
    assert build_view(app) == builder(app)


def test_draw_main_menu(app):
    stdscr = FakeScreen(24, 80)
    draw(stdscr, app)
    texts = [text for _, _, text in stdscr.writes]
    assert any("CAPYBARA HACKER" in text for text in texts)
    assert any("Main Menu" in text for text in texts)
    assert stdscr.refreshed


def test_draw_footer_on_last_line(app):
    stdscr = FakeScreen(24, 120)
    draw(stdscr, app)
    footer = build_view(app).footer
    assert (23, 0, footer) in stdscr.writes


def test_draw_stays_inside_window(app):
    stdscr = FakeScreen(5, 30)
    draw(stdscr, app)
    assert stdscr.writes
    assert all(0 <= y < 5 and 0 <= x < 30 for y, x, _ in stdscr.writes)
    assert all(x + len(text) < 30 for _, x, text in stdscr.writes)


def test_draw_scrolls_to_selection(app):
    entries = [
        LogEntry(f"line-{n}", LogLevel.INFO, f"message {n}", "raw") for n in range(50)
    ]
    app.current_logs = ComponentLogs("web-1", "Pod", "default", entries, len(entries))
    app.current_screen = Screen.LOGS_VIEWER
    app.logs_index = 49
    stdscr = FakeScreen(20, 120)
    draw(stdscr, app)
    texts = [text for _, _, text in stdscr.writes]
    assert any("message 49" in text for text in texts)
    assert not any(text.endswith("message 0") for text in texts)