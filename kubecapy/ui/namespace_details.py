"""Overview of one namespace: actions, pods and deployments."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.ui.view import Row, Tone, View


def build_namespace_details(app: App) -> View:
    """Describe the selected namespace with its action menu and components."""
    if app.selected_namespace is not None:
        title = f"Namespace: {app.selected_namespace}"
    else:
        title = "Namespace Details"

    actions = [
        Row(
            item,
            Tone.WHITE,
            bold=index == app.list_index,
            selectable=True,
            selected=index == app.list_index,
        )
        for index, item in enumerate(app.namespace_details_items())
    ]

    pods = [
        Row(
            f"Pod: {pod.name} | Status: {pod.status} | Ready: {str(pod.ready).lower()}",
            Tone.GREEN if pod.status == "Running" and pod.ready else Tone.YELLOW,
        )
        for pod in app.pods
    ]

    deployments = [
        Row(
            f"Deployment: {dep.name} | Replicas: {dep.ready_replicas}/{dep.desired_replicas}",
            Tone.GREEN if dep.ready_replicas == dep.desired_replicas else Tone.RED,
        )
        for dep in app.deployments
    ]

    return View(
        title=[Row(title)],
        sections=[("Actions", actions), ("Pods", pods), ("Deployments", deployments)],
    )