import pytest

from kubecapy.app import App, MAIN_MENU_ITEMS
from kubecapy.ui.main_menu import FOOTER, build_main_menu


@pytest.fixture
def app(tmp_path):
    root = tmp_path / "output"
    (root / "default").mkdir(parents=True)
    return App(root)


def test_menu_lists_every_item(app):
    view = build_main_menu(app)
    heading, rows = view.sections[0]
    assert heading == "Main Menu"
    assert [row.text for row in rows] == list(MAIN_MENU_ITEMS)
    assert view.selectable_count() == len(MAIN_MENU_ITEMS)


def test_first_item_selected_initially(app):
    rows = build_main_menu(app).sections[0][1]
    assert [row.selected for row in rows] == [True, False, False, False, False]


def test_selection_follows_navigation(app):
    app.next()
    app.next()
    rows = build_main_menu(app).sections[0][1]
    assert [i for i, row in enumerate(rows) if row.selected] == [2]


def test_title_and_footer(app):
    view = build_main_menu(app)
    assert view.title[0].text == "🐹 CAPYBARA HACKER"
    assert view.title[0].bold
    assert view.footer == FOOTER