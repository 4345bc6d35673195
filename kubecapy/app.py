"""Navigation state of the analyzer: screens, selections and what each key does."""

from __future__ import annotations

import sys
from enum import Enum, auto
from pathlib import Path

from kubecapy.errors import AppError, ExitRequested
from kubecapy.kubernetes import (
    DEFAULT_ROOT,
    ClusterAnalysis,
    DeploymentInfo,
    NamespaceInfo,
    PodInfo,
    analyze_cluster,
    load_deployments,
    load_namespaces,
    load_pods,
)
from kubecapy.logs import ComponentLogs, LogLevel, load_pod_logs


class Screen(Enum):
    MAIN_MENU = auto()
    NAMESPACE_LIST = auto()
    NAMESPACE_DETAILS = auto()
    CLUSTER_ANALYSIS = auto()
    COMPONENT_DETAILS = auto()
    LOGS_LIST = auto()
    LOGS_VIEWER = auto()
    CAPYBARA = auto()
    PODS_LIST = auto()
    DEPLOYMENTS_LIST = auto()


MAIN_MENU_ITEMS = (
    "🔍 Cluster Analysis",
    "📁 Browse Namespaces",
    "🐹 Capybara Easter Egg",
    "❓ Help",
    "🚪 Exit",
)

NAMESPACE_DETAILS_COUNT = 3

_LOG_FILE_NAMES = ("logs.txt", "log.txt", "logs.json")


def log_components(root: str | Path, namespace: str) -> list[str]:
    """Names of the component directories in a namespace that hold a log file."""
    namespace_dir = Path(root) / namespace
    try:
        directories = sorted(path for path in namespace_dir.iterdir() if path.is_dir())
    except OSError:
        return []
    return [
        directory.name
        for directory in directories
        if any((directory / name).exists() for name in _LOG_FILE_NAMES)
    ]


def _step(index: int | None, length: int, delta: int) -> int:
    if index is None:
        return 0
    return (index + delta) % length


class App:
    """The whole state of an interactive session over one cluster dump."""

    def __init__(self, root: str | Path = DEFAULT_ROOT) -> None:
        self.root = Path(root)
        self.namespaces: list[NamespaceInfo] = load_namespaces(self.root)
        self.current_screen = Screen.MAIN_MENU
        self.list_index: int | None = 0
        self.logs_index: int | None = 0
        self.details_index: int | None = 0
        self.selected_namespace: str | None = None
        self.selected_component: tuple[str, str] | None = None
        self.pods: list[PodInfo] = []
        self.deployments: list[DeploymentInfo] = []
        self.current_logs: ComponentLogs | None = None
        self.cluster_analysis: ClusterAnalysis | None = None
        self.log_filter: LogLevel | None = None
        self.show_capybara = False

    # --- list navigation ---------------------------------------------------

    def _analysis_components(self) -> list[tuple[str, str]]:
        if self.cluster_analysis is None:
            return []
        components: list[tuple[str, str]] = []
        for ns_analysis in self.cluster_analysis.namespaces:
            components.extend((pod.name, "Pod") for pod in ns_analysis.pods)
            components.extend((dep.name, "Deployment") for dep in ns_analysis.deployments)
        return components

    def _list_length(self) -> int:
        screen = self.current_screen
        if screen is Screen.MAIN_MENU:
            return len(MAIN_MENU_ITEMS)
        if screen is Screen.NAMESPACE_LIST:
            return len(self.namespaces)
        if screen is Screen.NAMESPACE_DETAILS:
            return NAMESPACE_DETAILS_COUNT
        if screen is Screen.PODS_LIST:
            return len(self.pods)
        if screen is Screen.DEPLOYMENTS_LIST:
            return len(self.deployments)
        if screen is Screen.CLUSTER_ANALYSIS:
            return len(self._analysis_components())
        if screen is Screen.LOGS_LIST and self.selected_namespace is not None:
            return len(log_components(self.root, self.selected_namespace))
        return 0

    def next(self) -> None:
        """Move the selection down, wrapping to the top."""
        length = self._list_length()
        if length:
            self.list_index = _step(self.list_index, length, 1)

    def previous(self) -> None:
        """Move the selection up, wrapping to the bottom."""
        length = self._list_length()
        if length:
            self.list_index = _step(self.list_index, length, -1)

    def scroll_logs_down(self) -> None:
        if self.current_logs is None or not self.current_logs.entries:
            return
        self.logs_index = _step(self.logs_index, len(self.current_logs.entries), 1)

    def scroll_logs_up(self) -> None:
        if self.current_logs is None or not self.current_logs.entries:
            return
        self.logs_index = _step(self.logs_index, len(self.current_logs.entries), -1)

    def scroll_details_down(self) -> None:
        total = len(self._analysis_components())
        if total:
            self.details_index = _step(self.details_index, total, 1)

    def scroll_details_up(self) -> None:
        total = len(self._analysis_components())
        if total:
            self.details_index = _step(self.details_index, total, -1)

    def toggle_log_filter(self, level: LogLevel | str) -> None:
        """Show only ``level``; choosing the active filter again clears it."""
        level = level if isinstance(level, LogLevel) else LogLevel(level)
        self.log_filter = None if self.log_filter is level else level
        self.logs_index = 0

    # --- selection ---------------------------------------------------------

    def select(self) -> None:
        """Act on the selected entry of the current screen.

        Raises ExitRequested when the exit entry of the main menu is chosen.
        """
        handlers = {
            Screen.MAIN_MENU: self._select_main_menu,
            Screen.NAMESPACE_LIST: self._select_namespace,
            Screen.NAMESPACE_DETAILS: self._select_namespace_action,
            Screen.CLUSTER_ANALYSIS: self._select_cluster_component,
            Screen.LOGS_LIST: self._select_log_component,
            Screen.PODS_LIST: self._select_pod,
            Screen.DEPLOYMENTS_LIST: self._select_deployment,
        }
        handler = handlers.get(self.current_screen)
        if handler is not None and self.list_index is not None:
            handler(self.list_index)

    def _select_main_menu(self, index: int) -> None:
        if index == 0:
            self.cluster_analysis = analyze_cluster(self.root)
            self.current_screen = Screen.CLUSTER_ANALYSIS
        elif index == 1:
            self.current_screen = Screen.NAMESPACE_LIST
        elif index == 2:
            self.current_screen = Screen.CAPYBARA
            self.show_capybara = True
        elif index == 4:
            raise ExitRequested()

    def _select_namespace(self, index: int) -> None:
        if index >= len(self.namespaces):
            return
        name = self.namespaces[index].name
        self.selected_namespace = name
        self.pods = load_pods(name, self.root)
        self.deployments = load_deployments(name, self.root)
        self.current_screen = Screen.NAMESPACE_DETAILS

    def _select_namespace_action(self, index: int) -> None:
        targets = (Screen.PODS_LIST, Screen.DEPLOYMENTS_LIST, Screen.LOGS_LIST)
        if index < len(targets):
            self.current_screen = targets[index]

    def _select_pod(self, index: int) -> None:
        if index < len(self.pods):
            self.selected_component = (self.pods[index].name, "Pod")
            self.current_screen = Screen.COMPONENT_DETAILS

    def _select_deployment(self, index: int) -> None:
        if index < len(self.deployments):
            self.selected_component = (self.deployments[index].name, "Deployment")
            self.current_screen = Screen.COMPONENT_DETAILS

    def _select_cluster_component(self, index: int) -> None:
        components = self._analysis_components()
        if index < len(components):
            self.selected_component = components[index]
            self.current_screen = Screen.COMPONENT_DETAILS

    def _select_log_component(self, index: int) -> None:
        namespace = self.selected_namespace
        if namespace is None:
            return
        components = log_components(self.root, namespace)
        if index >= len(components):
            return
        name = components[index]
        self.selected_component = (name, "Component")
        try:
            logs = load_pod_logs(namespace, name, self.root)
        except AppError as error:
            print(
                f"Warning: Could not load logs for component {name}: {error}",
                file=sys.stderr,
            )
            return
        self.current_logs = logs
        self.current_screen = Screen.LOGS_VIEWER

    # --- going back --------------------------------------------------------

    def back(self) -> None:
        """Return to the screen this one was reached from and reset selections."""
        screen = self.current_screen
        if screen in (Screen.NAMESPACE_LIST, Screen.CLUSTER_ANALYSIS, Screen.CAPYBARA):
            self.current_screen = Screen.MAIN_MENU
            self.show_capybara = False
        elif screen is Screen.NAMESPACE_DETAILS:
            self.current_screen = Screen.NAMESPACE_LIST
        elif screen in (Screen.PODS_LIST, Screen.DEPLOYMENTS_LIST, Screen.LOGS_LIST):
            self.current_screen = Screen.NAMESPACE_DETAILS
        elif screen is Screen.COMPONENT_DETAILS:
            component_type = self.selected_component[1] if self.selected_component else None
            self.current_screen = {
                "Pod": Screen.PODS_LIST,
                "Deployment": Screen.DEPLOYMENTS_LIST,
            }.get(component_type, Screen.CLUSTER_ANALYSIS)
            self.selected_component = None
        elif screen is Screen.LOGS_VIEWER:
            self.current_screen = Screen.LOGS_LIST
            self.current_logs = None
            self.log_filter = None
        self.list_index = 0
        self.logs_index = 0
        self.details_index = 0

    # --- menu texts --------------------------------------------------------

    def main_menu_items(self) -> list[str]:
        return list(MAIN_MENU_ITEMS)

    def namespace_details_items(self) -> list[str]:
        return [
            f"📦 View Pods ({len(self.pods)})",
            f"🚀 View Deployments ({len(self.deployments)})",
            "📋 View Logs",
        ]