"""Cluster-wide overview: every namespace with its pods and deployments."""

from __future__ import annotations

from collections.abc import Sequence

from kubecapy.app import App
from kubecapy.kubernetes import ClusterAnalysis
from kubecapy.ui.view import Row, Tone, View

FOOTER = "↑↓ Navigate | Enter: View Details | ESC: Back | q: Quit"
SECTION_TITLE = "Cluster Components (Select to view details)"


def selectable_index(rows: Sequence[Row], display_index: int) -> int:
    """Position among the selectable rows of the row shown at ``display_index``.

    An index past the end of ``rows`` gives 0.
    """
    if not 0 <= display_index < len(rows):
        return 0
    return sum(1 for row in rows[:display_index] if row.selectable)


def _display_items(analysis: ClusterAnalysis) -> list[tuple[str, bool]]:
    items: list[tuple[str, bool]] = []
    for ns in analysis.namespaces:
        items.append(
            (
                f"📁 Namespace: {ns.name} "
                f"({len(ns.pods)} pods, {len(ns.deployments)} deployments)",
                False,
            )
        )
        for pod in ns.pods:
            icon = "🟢" if pod.ready and pod.status == "Running" else "🔴"
            items.append((f"  {icon} Pod: {pod.name} ({pod.status})", True))
        for dep in ns.deployments:
            icon = "🟢" if dep.ready_replicas == dep.desired_replicas else "🟡"
            items.append(
                (
                    f"  {icon} Deployment: {dep.name} "
                    f"({dep.ready_replicas}/{dep.desired_replicas})",
                    True,
                )
            )
        if ns.pods or ns.deployments:
            items.append(("", False))
    if items and items[-1][0] == "":
        items.pop()
    return items


def build_cluster_analysis(app: App) -> View:
    """Describe the analysed cluster, highlighting the selected component."""
    title = [Row("🔍 Cluster Analysis", Tone.CYAN, bold=True)]

    if app.cluster_analysis is None:
        section = (
            "Cluster Analysis",
            [Row("Loading cluster analysis...", Tone.YELLOW)],
        )
        return View(title=title, sections=[section], footer=FOOTER)

    wanted = app.list_index if app.list_index is not None else 0
    rows: list[Row] = []
    position = 0
    for text, selectable in _display_items(app.cluster_analysis):
        if selectable:
            selected = position == wanted
            position += 1
            rows.append(
                Row(text, Tone.WHITE, bold=selected, selectable=True, selected=selected)
            )
        else:
            rows.append(Row(text, Tone.GRAY, italic=True))

    return View(title=title, sections=[(SECTION_TITLE, rows)], footer=FOOTER)