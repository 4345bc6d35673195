"""The list of namespaces found in the dump."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.ui.view import Row, Tone, View

FOOTER = "↑↓ Navigate | Enter: Select | ESC: Back | q: Quit"


def build_namespace_list(app: App) -> View:
    """Describe every namespace with its pod and deployment counts."""
    rows = [
        Row(
            f"📁 {ns.name} ({ns.pod_count} pods, {ns.deployment_count} deployments)",
            Tone.WHITE,
            bold=index == app.list_index,
            selectable=True,
            selected=index == app.list_index,
        )
        for index, ns in enumerate(app.namespaces)
    ]
    return View(
        title=[Row("📁 Namespace List")],
        sections=[("Namespaces", rows)],
        footer=FOOTER,
    )