"""Command-line entry point and key handling of the interactive analyzer."""

from __future__ import annotations

import argparse
import curses
import sys
from pathlib import Path

from kubecapy.app import App, Screen
from kubecapy.errors import AppError, ExitRequested
from kubecapy.kubernetes import DEFAULT_ROOT
from kubecapy.logs import LogLevel, load_pod_logs
from kubecapy.ui.screen import draw

_FILTER_CYCLE = (LogLevel.ERROR, LogLevel.WARNING, LogLevel.INFO, LogLevel.DEBUG)

_FILTER_KEYS = {
    "e": LogLevel.ERROR,
    "w": LogLevel.WARNING,
    "i": LogLevel.INFO,
    "d": LogLevel.DEBUG,
}

_SPECIAL_INTS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
    27: "esc",
}

_SPECIAL_CHARS = {"\x1b": "esc", "\n": "enter", "\r": "enter"}


def _normalize(key: int | str) -> str:
    if isinstance(key, int):
        if key in _SPECIAL_INTS:
            return _SPECIAL_INTS[key]
        return chr(key) if 0 <= key < 0x110000 else ""
    return _SPECIAL_CHARS.get(key, key)


def _open_component_logs(app: App) -> None:
    if app.selected_component is None or app.cluster_analysis is None:
        return
    name, component_type = app.selected_component
    for ns in app.cluster_analysis.namespaces:
        if component_type == "Pod":
            found = any(pod.name == name for pod in ns.pods)
        elif component_type == "Deployment":
            found = any(dep.name == name for dep in ns.deployments)
        else:
            found = False
        if not found:
            continue
        try:
            logs = load_pod_logs(ns.name, name, app.root)
        except AppError:
            return
        app.current_logs = logs
        app.current_screen = Screen.LOGS_VIEWER
        app.selected_namespace = ns.name
        return


def _cycle_filter(app: App) -> None:
    current = app.log_filter
    if current is None:
        app.toggle_log_filter(_FILTER_CYCLE[0])
    elif current is _FILTER_CYCLE[-1]:
        app.log_filter = None
    else:
        app.toggle_log_filter(_FILTER_CYCLE[_FILTER_CYCLE.index(current) + 1])


def handle_key(app: App, key: int | str) -> bool:
    """Apply one key press to the session; return True when the program should quit.

    ``key`` is what curses returns, or one of the names ``up``, ``down``,
    ``enter`` and ``esc``.
    """
    name = _normalize(key)
    screen = app.current_screen
    in_viewer = screen is Screen.LOGS_VIEWER

    if name == "q":
        return True
    if name == "esc":
        if screen is Screen.MAIN_MENU:
            return True
        app.back()
    elif name == "down":
        if in_viewer:
            app.scroll_logs_down()
        elif screen is Screen.COMPONENT_DETAILS:
            app.scroll_details_down()
        else:
            app.next()
    elif name == "up":
        if in_viewer:
            app.scroll_logs_up()
        elif screen is Screen.COMPONENT_DETAILS:
            app.scroll_details_up()
        else:
            app.previous()
    elif name == "enter":
        try:
            app.select()
        except ExitRequested:
            return True
        except AppError:
            pass
    elif name == "l":
        if screen is Screen.COMPONENT_DETAILS:
            _open_component_logs(app)
    elif name == "f":
        if in_viewer:
            _cycle_filter(app)
    elif name in _FILTER_KEYS:
        if in_viewer:
            app.toggle_log_filter(_FILTER_KEYS[name])
    elif name == "a":
        if in_viewer:
            app.log_filter = None
    return False


def run(stdscr, app: App) -> None:
    """Draw and react to keys until the user quits."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.set_escdelay(25)
    except (AttributeError, curses.error):
        pass
    stdscr.keypad(True)
    while True:
        draw(stdscr, app)
        try:
            key = stdscr.get_wch()
        except curses.error:
            continue
        if handle_key(app, key):
            return


def _report_missing(root: Path) -> None:
    name = root.as_posix()
    for line in (
        f"❌ Error: '{name}' directory not found!",
        f"Please ensure you have the Kubernetes cluster dump in the '{name}' directory.",
        "Expected structure:",
        f"{name}/",
        "├── namespace1/",
        "│   ├── pods.json",
        "│   ├── deployments.json",
        "│   └── ...",
        "└── namespace2/",
    ):
        print(line, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive analyzer over a cluster dump directory."""
    parser = argparse.ArgumentParser(
        prog="kubecapy", description="Browse and analyse a Kubernetes cluster dump."
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=str(DEFAULT_ROOT),
        help="directory holding one sub-directory per namespace (default: output)",
    )
    args = parser.parse_args(argv)
    root = Path(args.root)

    if not root.exists():
        _report_missing(root)
        return 1

    try:
        app = App(root)
        curses.wrapper(run, app)
    except AppError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print("👋 Thanks for using Capybara Hacker Kubernetes Analyzer!")
    return 0


if __name__ == "__main__":
    sys.exit(main())