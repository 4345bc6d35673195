"""The list of components in a namespace that have logs."""

from __future__ import annotations

from pathlib import Path

from kubecapy.app import App, log_components
from kubecapy.ui.view import Row, Tone, View

FOOTER = "↑↓ Navigate | Enter: View Logs | ESC: Back | q: Quit"

_LOG_SUFFIXES = (".txt", ".log", ".json")


def determine_component_type(name: str) -> str:
    """Guess the kind of component from its directory name."""
    if "pod" in name or ("-" in name and name.count("-") >= 2):
        return "Pod"
    if "deploy" in name:
        return "Deployment"
    if "service" in name or "svc" in name:
        return "Service"
    if "manager" in name:
        return "Manager"
    if "controller" in name:
        return "Controller"
    if "operator" in name:
        return "Operator"
    return "Component"


def _log_files(namespace_dir: Path) -> list[str]:
    try:
        paths = sorted(namespace_dir.iterdir())
    except OSError:
        return []
    return [path.stem for path in paths if path.suffix in _LOG_SUFFIXES]


def build_logs_list(app: App) -> View:
    """Describe the log sources of the selected namespace."""
    namespace = app.selected_namespace
    if namespace is not None:
        title = f"📋 Available Logs in Namespace: {namespace}"
    else:
        title = "📋 Available Logs"

    sources: list[tuple[str, bool]] = []
    if namespace is not None:
        sources = [
            (f"📄 {determine_component_type(name)}: {name}", True)
            for name in log_components(app.root, namespace)
        ]
        if not sources:
            sources = [
                (f"📄 Log File: {stem}", False)
                for stem in _log_files(app.root / namespace)
            ]

    if not sources:
        root = app.root.as_posix()
        help_lines = [
            "No log sources found in this namespace",
            "",
            "Expected log structure:",
            f"  {root}/{{namespace}}/{{component}}/logs.txt",
            f"  {root}/{{namespace}}/{{component}}/log.txt",
            "",
        ]
        if namespace is not None:
            help_lines.append(f"Checked directory: {(app.root / namespace).as_posix()}/")
        sources = [(line, False) for line in help_lines]

    rows = [
        Row(
            text,
            Tone.WHITE,
            bold=index == app.list_index,
            selectable=selectable,
            selected=index == app.list_index,
        )
        for index, (text, selectable) in enumerate(sources)
    ]
    return View(
        title=[Row(title)],
        sections=[("Select Component to View Logs", rows)],
        footer=FOOTER,
    )