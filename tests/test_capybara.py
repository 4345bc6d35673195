from kubecapy.app import App
from kubecapy.ui.capybara import SECTION_TITLE, build_capybara


def _app(tmp_path):
    root = tmp_path / "output"
    root.mkdir()
    return App(root)


def test_section_title(tmp_path):
    view = build_capybara(_app(tmp_path))
    assert [title for title, _ in view.sections] == [SECTION_TITLE]


def test_contains_banner_and_hint(tmp_path):
    view = build_capybara(_app(tmp_path))
    texts = [row.text for _, rows in view.sections for row in rows]
    assert "🎩 CAPYBARA HACKER 🐹" in texts
    assert texts[-1] == "Press ESC to return to the main menu"


def test_nothing_selectable(tmp_path):
    view = build_capybara(_app(tmp_path))
    assert view.selectable_count() == 0


def test_independent_of_state(tmp_path):
    app = _app(tmp_path)
    first = build_capybara(app)
    app.list_index = 3
    assert build_capybara(app) == first