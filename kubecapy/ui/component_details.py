"""Detailed view of one pod, deployment or other component."""

from __future__ import annotations

from kubecapy.app import App
from kubecapy.kubernetes import DeploymentInfo, PodInfo
from kubecapy.ui.view import Row, Tone, View

FOOTER = "↑↓: Scroll | l: View Logs | ESC: Back | q: Quit"

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def _parse_restarts(text: str) -> int:
    try:
        count = int(text)
    except ValueError:
        return 0
    return count if _I32_MIN <= count <= _I32_MAX else 0


def _debug_option(value: str | None) -> str:
    if value is None:
        return "None"
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'Some("{escaped}")'


def pod_detail_lines(pod: PodInfo, namespace: str) -> list[str]:
    """Text lines describing a pod found in ``namespace``."""
    healthy = pod.ready and pod.status == "Running"
    lines = [
        "📦 POD INFORMATION",
        "",
        f"Name: {pod.name}",
        f"Namespace: {namespace}",
        f"Status: {'🟢' if healthy else '🔴'} {pod.status}",
        f"Ready: {'✅ Yes' if pod.ready else '❌ No'}",
        "",
        "🔧 RESOURCE INFORMATION",
        f"CPU Usage: {pod.cpu_usage if pod.cpu_usage is not None else 'Not available'}",
        "Memory Usage: "
        + (pod.memory_usage if pod.memory_usage is not None else "Not available"),
    ]

    if pod.restart_count is not None:
        icon = "⚠️" if _parse_restarts(pod.restart_count) > 0 else "✅"
        lines.append(f"Restart Count: {icon} {pod.restart_count}")
    else:
        lines.append("Restart Count: Not available")

    lines += [
        "",
        "📦 CONTAINER INFORMATION",
        f"Image: {pod.image if pod.image is not None else 'Not available'}",
        "",
        "❤️ HEALTH STATUS",
    ]

    if healthy:
        lines.append("Overall Health: 🟢 Healthy")
        lines.append("Status: Pod is running and ready to serve traffic")
    else:
        lines.append("Overall Health: 🔴 Unhealthy")
        if not pod.ready:
            lines.append("Issue: Pod is not ready to serve traffic")
        if pod.status != "Running":
            lines.append(f"Issue: Pod status is '{pod.status}' instead of 'Running'")

    lines += [
        "",
        "🔍 DEBUG INFORMATION",
        f"Pod object loaded from namespace: {namespace}",
    ]
    return lines


def deployment_detail_lines(deployment: DeploymentInfo, namespace: str) -> list[str]:
    """Text lines describing a deployment found in ``namespace``."""
    ready, desired = deployment.ready_replicas, deployment.desired_replicas
    if ready == desired and desired > 0:
        icon = "🟢"
    elif desired == 0:
        icon = "⚪"
    else:
        icon = "🔴"

    lines = [
        "🚀 DEPLOYMENT INFORMATION",
        "",
        f"Name: {deployment.name}",
        f"Namespace: {namespace}",
        f"Replicas: {icon} {ready}/{desired}",
    ]
    if desired > 0:
        lines.append(f"Availability: {ready / desired * 100.0:.1f}%")
    else:
        lines.append("Availability: N/A (scaled to 0)")

    lines += [
        "",
        "📋 DEPLOYMENT STRATEGY",
        "Update Strategy: "
        + (deployment.strategy if deployment.strategy is not None else "Not available"),
        "",
        "📦 CONTAINER IMAGE",
    ]

    image = deployment.image
    if image is not None:
        lines.append(f"Image: {image}")
        slash = image.rfind("/")
        if slash >= 0:
            name, colon, tag = image[slash + 1:].partition(":")
            if colon:
                lines.append(f"  Image Name: {name}")
                lines.append(f"  Tag: {tag}")
    else:
        lines.append("Image: Not available")

    lines += ["", "❤️ HEALTH STATUS"]
    if ready == desired and desired > 0:
        lines.append("Overall Health: 🟢 Healthy")
        lines.append("Status: All replicas are ready and available")
    elif desired == 0:
        lines.append("Overall Health: ⚪ Scaled to Zero")
        lines.append("Status: Deployment is intentionally scaled to 0 replicas")
    else:
        lines.append("Overall Health: 🔴 Unhealthy")
        if ready == 0:
            lines.append("Issue: No replicas are ready (complete outage)")
        else:
            lines.append(
                f"Issue: Only {ready}/{desired} replicas are ready (partial outage)"
            )

    lines += [
        "",
        "🔍 DEBUG INFORMATION",
        f"Deployment object loaded from namespace: {namespace}",
    ]
    return lines


def _pod_lines(app: App, name: str) -> list[str]:
    pod = next((p for p in app.pods if p.name == name), None)
    if pod is not None:
        return pod_detail_lines(pod, app.selected_namespace or "unknown")
    if app.cluster_analysis is not None:
        for ns in app.cluster_analysis.namespaces:
            found = next((p for p in ns.pods if p.name == name), None)
            if found is not None:
                return pod_detail_lines(found, ns.name)
    return [
        "Pod not found in loaded data",
        "",
        f"Searched for pod: {name}",
        f"Current namespace: {_debug_option(app.selected_namespace)}",
        f"Loaded pods count: {len(app.pods)}",
    ]


def _deployment_lines(app: App, name: str) -> list[str]:
    dep = next((d for d in app.deployments if d.name == name), None)
    if dep is not None:
        return deployment_detail_lines(dep, app.selected_namespace or "unknown")
    if app.cluster_analysis is not None:
        for ns in app.cluster_analysis.namespaces:
            found = next((d for d in ns.deployments if d.name == name), None)
            if found is not None:
                return deployment_detail_lines(found, ns.name)
    return [
        "Deployment not found in loaded data",
        "",
        f"Searched for deployment: {name}",
        f"Current namespace: {_debug_option(app.selected_namespace)}",
        f"Loaded deployments count: {len(app.deployments)}",
    ]


def _generic_lines(name: str, component_type: str) -> list[str]:
    return [
        f"Component Type: {component_type}",
        f"Name: {name}",
        "",
        "No detailed information available for this component type.",
    ]


def build_component_details(app: App) -> View:
    """Describe the selected component, looked up in the loaded data."""
    if app.selected_component is None:
        return View(
            title=[Row("Component Details", Tone.CYAN, bold=True)],
            sections=[("", [Row("No component selected")])],
            footer=FOOTER,
        )

    name, component_type = app.selected_component
    if component_type == "Pod":
        lines = _pod_lines(app, name)
    elif component_type == "Deployment":
        lines = _deployment_lines(app, name)
    else:
        lines = _generic_lines(name, component_type)

    return View(
        title=[Row(f"📋 {component_type} Details: {name}", Tone.CYAN, bold=True)],
        sections=[("Details", [Row(line) for line in lines])],
        footer=FOOTER,
    )