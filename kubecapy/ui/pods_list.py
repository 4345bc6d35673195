"""The list of pods in the selected namespace."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.kubernetes import PodInfo
from kubecapy.ui.view import Row, Tone, View

FOOTER = "↑↓ Navigate | Enter: View Details | ESC: Back | q: Quit"

_I32_MAX = 2**31 - 1


def _restarts(pod: PodInfo) -> int:
    if pod.restart_count is None:
        return 0
    try:
        count = int(pod.restart_count)
    except ValueError:
        return 0
    return count if -_I32_MAX - 1 <= count <= _I32_MAX else 0


def _pod_row(pod: PodInfo, selected: bool) -> Row:
    if pod.ready and pod.status == "Running":
        icon, tone = "🟢", Tone.GREEN
    elif pod.status == "Running":
        icon, tone = "🟡", Tone.YELLOW
    else:
        icon, tone = "🔴", Tone.RED

    restarts = _restarts(pod)
    restart_info = f" (↻ {restarts})" if restarts > 0 else ""
    text = (
        f"{icon} {pod.name} | Status: {pod.status} | "
        f"Ready: {'✅' if pod.ready else '❌'}{restart_info}"
    )
    return Row(
        text,
        Tone.WHITE if selected else tone,
        bold=selected,
        selectable=True,
        selected=selected,
    )


def build_pods_list(app: App) -> View:
    """Describe the pods of the selected namespace, or say there are none."""
    if app.selected_namespace is not None:
        title = f"📦 Pods in Namespace: {app.selected_namespace}"
    else:
        title = "📦 Pods List"

    if not app.pods:
        section = ("Pods", [Row("No pods found in this namespace", Tone.YELLOW)])
    else:
        section = (
            "Select Pod to view details",
            [_pod_row(pod, index == app.list_index) for index, pod in enumerate(app.pods)],
        )

    return View(
        title=[Row(title, Tone.CYAN, bold=True)],
        sections=[section],
        footer=FOOTER,
    )