"""The log viewer: component summary, level statistics and the entries."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.logs import ComponentLogs, LogEntry, LogLevel
from kubecapy.ui.view import Row, Tone, View

MESSAGE_WIDTH = 100

_LEVEL_TONES = {
    LogLevel.ERROR: Tone.RED,
    LogLevel.WARNING: Tone.YELLOW,
    LogLevel.INFO: Tone.BLUE,
    LogLevel.DEBUG: Tone.GRAY,
}


def truncate_timestamp(timestamp: str) -> str:
    """Shorten long timestamps to date and time of day."""
    if len(timestamp) <= 19:
        return timestamp
    t_pos = timestamp.find("T")
    if t_pos >= 0:
        return f"{timestamp[:10]} {timestamp[t_pos + 1:t_pos + 9]}"
    return timestamp[:19]


def truncate_message(message: str, max_len: int) -> str:
    """Cut ``message`` to ``max_len`` characters, ending with an ellipsis."""
    if len(message) <= max_len:
        return message
    if max_len < 3:
        raise ValueError("max_len must leave room for the ellipsis")
    return message[: max_len - 3] + "..."


def visible_entries(app: App) -> list[LogEntry]:
    """The loaded entries that pass the current level filter."""
    if app.current_logs is None:
        return []
    if app.log_filter is None:
        return list(app.current_logs.entries)
    return [entry for entry in app.current_logs.entries if entry.level is app.log_filter]


def _percent(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(count / total * 100.0 + 0.5)


def _header(logs: ComponentLogs) -> list[Row]:
    total = logs.total_entries
    errors = logs.error_count()
    warnings = logs.warning_count()
    others = total - errors - warnings
    return [
        Row(f"Component: {logs.component_name}", Tone.WHITE, bold=True),
        Row(f"Type: {logs.component_type} | Namespace: {logs.namespace}", Tone.YELLOW),
        Row(f"Total Entries: {total}", Tone.WHITE),
        Row(f"🔴 Errors: {errors} ({_percent(errors, total)}%)", Tone.RED),
        Row(f"🟡 Warnings: {warnings} ({_percent(warnings, total)}%)", Tone.YELLOW),
        Row(f"🔵 Info/Debug: {others} ({_percent(others, total)}%)", Tone.BLUE),
    ]


def _entry_row(entry: LogEntry, selected: bool) -> Row:
    text = (
        f"{entry.level.color_code()} [{truncate_timestamp(entry.timestamp)}] "
        f"[{entry.source}] {truncate_message(entry.message, MESSAGE_WIDTH)}"
    )
    return Row(
        text,
        _LEVEL_TONES[entry.level],
        bold=selected,
        selectable=True,
        selected=selected,
    )


def _footer(app: App) -> str:
    name = app.log_filter.value if app.log_filter is not None else "all"
    return (
        f"Filter: {name} | ↑↓: Scroll | f: Filter (e/w/i/d/a) | "
        "/: Search | ESC: Back | q: Quit"
    )


def build_logs_viewer(app: App) -> View:
    """Describe the loaded logs, filtered and with the scrolled-to entry highlighted."""
    logs = app.current_logs
    if logs is None:
        return View(
            title=[Row("No logs loaded")],
            sections=[("Logs", [Row("No logs available")])],
            footer=_footer(app),
        )

    entries = visible_entries(app)
    rows = [
        _entry_row(entry, index == app.logs_index) for index, entry in enumerate(entries)
    ]
    return View(
        title=_header(logs),
        sections=[(f"Logs ({len(entries)} entries)", rows)],
        footer=_footer(app),
    )