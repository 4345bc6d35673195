"""Choosing the view for the current screen and drawing it with curses."""

from __future__ import annotations

import curses
from collections.abc import Callable

from kubecapy.app import App, Screen
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
from kubecapy.ui.view import Row, Tone, View

_BUILDERS: dict[Screen, Callable[[App], View]] = {
    Screen.MAIN_MENU: build_main_menu,
    Screen.NAMESPACE_LIST: build_namespace_list,
    Screen.NAMESPACE_DETAILS: build_namespace_details,
    Screen.CLUSTER_ANALYSIS: build_cluster_analysis,
    Screen.COMPONENT_DETAILS: build_component_details,
    Screen.LOGS_LIST: build_logs_list,
    Screen.LOGS_VIEWER: build_logs_viewer,
    Screen.CAPYBARA: build_capybara,
    Screen.PODS_LIST: build_pods_list,
    Screen.DEPLOYMENTS_LIST: build_deployments_list,
}

_CURSES_COLORS = {
    Tone.WHITE: curses.COLOR_WHITE,
    Tone.CYAN: curses.COLOR_CYAN,
    Tone.GREEN: curses.COLOR_GREEN,
    Tone.YELLOW: curses.COLOR_YELLOW,
    Tone.RED: curses.COLOR_RED,
    Tone.BLUE: curses.COLOR_BLUE,
    Tone.MAGENTA: curses.COLOR_MAGENTA,
    Tone.GRAY: curses.COLOR_WHITE,
}

_ITALIC = getattr(curses, "A_ITALIC", 0)


class _Palette:
    """Colour pairs, set up once a curses screen exists."""

    def __init__(self) -> None:
        self.ready = False
        self.pairs: dict[Tone, int] = {}

    def ensure(self) -> None:
        if self.ready:
            return
        try:
            if curses.has_colors():
                curses.start_color()
                try:
                    curses.use_default_colors()
                    background = -1
                except curses.error:
                    background = curses.COLOR_BLACK
                for number, (tone, color) in enumerate(_CURSES_COLORS.items(), start=1):
                    curses.init_pair(number, color, background)
                    self.pairs[tone] = number
        except curses.error:
            return
        self.ready = True

    def attr(self, tone: Tone) -> int:
        number = self.pairs.get(tone)
        if not self.ready or number is None:
            return 0
        return curses.color_pair(number)


_PALETTE = _Palette()


def build_view(app: App) -> View:
    """The view of the screen the session is on."""
    return _BUILDERS[app.current_screen](app)


def _attr(row: Row) -> int:
    attr = _PALETTE.attr(row.tone)
    if row.bold:
        attr |= curses.A_BOLD
    if row.italic:
        attr |= _ITALIC
    if row.selected:
        attr |= curses.A_REVERSE
    return attr


def _put(stdscr, y: int, x: int, text: str, attr: int, width: int) -> None:
    room = width - x - 1
    if room <= 0:
        return
    try:
        stdscr.addnstr(y, x, text, room, attr)
    except curses.error:
        pass


def draw(stdscr, app: App) -> None:
    """Draw the current screen, scrolling so the selected row stays visible."""
    _PALETTE.ensure()
    view = build_view(app)
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    top = view.title[:height]
    for y, row in enumerate(top):
        x = max(0, (width - len(row.text)) // 2)
        _put(stdscr, y, x, row.text, _attr(row), width)

    body: list[tuple[str, int]] = []
    selected_line: int | None = None
    for title, rows in view.sections:
        if title:
            body.append((f"[ {title} ]", curses.A_BOLD))
        for row in rows:
            if row.selected:
                selected_line = len(body)
            marker = "> " if row.selected else "  "
            body.append((marker + row.text, _attr(row)))

    footer_height = 1 if view.footer else 0
    space = max(0, height - len(top) - footer_height)
    offset = 0
    if selected_line is not None and space:
        offset = max(0, selected_line - space + 1)
    for y, (text, attr) in enumerate(body[offset:offset + space], start=len(top)):
        _put(stdscr, y, 0, text, attr, width)

    if view.footer and height > len(top):
        _put(stdscr, height - 1, 0, view.footer, _PALETTE.attr(Tone.GRAY), width)

    stdscr.refresh()