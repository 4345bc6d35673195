"""The list of deployments in the selected namespace."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.kubernetes import DeploymentInfo
from kubecapy.ui.view import Row, Tone, View

FOOTER = "↑↓ Navigate | Enter: View Details | ESC: Back | q: Quit"


def _deployment_row(deployment: DeploymentInfo, selected: bool) -> Row:
    ready, desired = deployment.ready_replicas, deployment.desired_replicas
    if ready == desired and desired > 0:
        icon, tone = "🟢", Tone.GREEN
    elif desired == 0:
        icon, tone = "⚪", Tone.GRAY
    else:
        icon, tone = "🔴", Tone.RED

    strategy = f" | Strategy: {deployment.strategy}" if deployment.strategy is not None else ""
    text = f"{icon} {deployment.name} | Replicas: {ready}/{desired}{strategy}"
    return Row(
        text,
        Tone.WHITE if selected else tone,
        bold=selected,
        selectable=True,
        selected=selected,
    )


def build_deployments_list(app: App) -> View:
    """Describe the deployments of the selected namespace, or say there are none."""
    if app.selected_namespace is not None:
        title = f"🚀 Deployments in Namespace: {app.selected_namespace}"
    else:
        title = "🚀 Deployments List"

    if not app.deployments:
        section = (
            "Deployments",
            [Row("No deployments found in this namespace", Tone.YELLOW)],
        )
    else:
        section = (
            "Select Deployment to view details",
            [
                _deployment_row(deployment, index == app.list_index)
                for index, deployment in enumerate(app.deployments)
            ],
        )

    return View(
        title=[Row(title, Tone.CYAN, bold=True)],
        sections=[section],
        footer=FOOTER,
    )