"""The main menu screen."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.ui.view import Row, Tone, View

FOOTER = "Use ↑↓ to navigate, Enter to select, ESC to go back, q to quit"


def build_main_menu(app: App) -> View:
    """Describe the main menu with the current entry highlighted."""
    title = [
        Row("🐹 CAPYBARA HACKER", Tone.CYAN, bold=True),
        Row("Kubernetes Cluster Analyzer", Tone.GREEN),
        Row("Version 1.0", Tone.MAGENTA),
    ]
    rows = [
        Row(
            item,
            Tone.WHITE,
            bold=index == app.list_index,
            selectable=True,
            selected=index == app.list_index,
        )
        for index, item in enumerate(app.main_menu_items())
    ]
    return View(title=title, sections=[("Main Menu", rows)], footer=FOOTER)