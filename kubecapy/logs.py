"""Reading, classifying and filtering component logs from a cluster dump."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from kubecapy.errors import AppError
from kubecapy.kubernetes import DEFAULT_ROOT


class LogLevel(Enum):
    """Severity of a log entry; the value is the name used by log filters."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    @property
    def priority(self) -> int:
        """Rank used for minimum-level filtering: higher is more severe."""
        return _PRIORITY[self]

    def color_code(self) -> str:
        """The coloured marker shown next to entries of this level."""
        return _COLOR_CODES[self]

    def label(self) -> str:
        """The short upper-case name of the level."""
        return _LABELS[self]


_PRIORITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARNING: 2,
    LogLevel.ERROR: 3,
}

_COLOR_CODES = {
    LogLevel.ERROR: "🔴",
    LogLevel.WARNING: "🟡",
    LogLevel.INFO: "🔵",
    LogLevel.DEBUG: "⚪",
}

_LABELS = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARNING: "WARN",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
}

_EXACT_LEVELS = {
    **dict.fromkeys(("error", "err", "fatal", "failed"), LogLevel.ERROR),
    **dict.fromkeys(("warning", "warn", "w"), LogLevel.WARNING),
    **dict.fromkeys(("info", "information", "i"), LogLevel.INFO),
    **dict.fromkeys(("debug", "dbg", "trace", "d"), LogLevel.DEBUG),
}

_BRACKET_TAGS = ("ERROR", "WARN", "WARNING", "INFO", "DEBUG", "TRACE")


def parse_level(text: str) -> LogLevel:
    """Map a level name, or text mentioning one, to a LogLevel (INFO if unknown)."""
    lowered = text.lower()
    exact = _EXACT_LEVELS.get(lowered)
    if exact is not None:
        return exact
    if any(word in lowered for word in ("error", "failed", "fatal")):
        return LogLevel.ERROR
    if "warn" in lowered:
        return LogLevel.WARNING
    if "info" in lowered:
        return LogLevel.INFO
    if "debug" in lowered or "trace" in lowered:
        return LogLevel.DEBUG
    return LogLevel.INFO


@dataclass
class LogEntry:
    timestamp: str
    level: LogLevel
    message: str
    source: str


@dataclass
class ComponentLogs:
    component_name: str
    component_type: str
    namespace: str
    entries: list[LogEntry] = field(default_factory=list)
    total_entries: int = 0

    def error_count(self) -> int:
        """Number of entries at ERROR level."""
        return sum(1 for entry in self.entries if entry.level is LogLevel.ERROR)

    def warning_count(self) -> int:
        """Number of entries at WARNING level."""
        return sum(1 for entry in self.entries if entry.level is LogLevel.WARNING)

    def recent_logs(self, count: int) -> list[LogEntry]:
        """The first ``count`` entries (the most recent, as entries are kept newest first)."""
        if count < 0:
            raise ValueError("count must not be negative")
        return self.entries[:count]


# --- plain-text logs -------------------------------------------------------


def _bracket_level(line: str) -> tuple[str, str] | None:
    """Match ``[LEVEL] message`` anywhere in the line."""
    for tag in _BRACKET_TAGS:
        pattern = f"[{tag}]"
        pos = line.find(pattern)
        if pos >= 0:
            end = pos + len(pattern)
            message = line[end:].strip() if end < len(line) else line
            return tag, message
    return None


def _split_level_message(rest: str) -> tuple[str, str] | None:
    parts = rest.split(":", 1)
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


def _iso_log(line: str) -> tuple[str, str, str] | None:
    """Match ``<ISO timestamp ending in Z> LEVEL: message``."""
    t_pos = line.find("T")
    if t_pos < 0:
        return None
    z_pos = line.find("Z", t_pos)
    if z_pos < 0:
        return None
    split = _split_level_message(line[z_pos + 1:].strip())
    if split is None:
        return None
    return line[: z_pos + 1], split[0], split[1]


def _bracket_timestamp_log(line: str) -> tuple[str, str, str] | None:
    """Match ``[timestamp] LEVEL: message``."""
    if not line.startswith("["):
        return None
    end = line.find("]")
    if end < 0:
        return None
    split = _split_level_message(line[end + 1:].strip())
    if split is None:
        return None
    return line[1:end], split[0], split[1]


def _container_log(line: str) -> tuple[str, str, str] | None:
    """Match ``<timestamp> <stream> <tag> message`` as written by container runtimes."""
    parts = line.split(" ", 3)
    if len(parts) < 4:
        return None
    level = "ERROR" if parts[1] == "stderr" else "INFO"
    return parts[0], level, parts[3]


def _level_in_line(line: str) -> LogLevel | None:
    upper = line.upper()
    if "ERROR" in upper or "FAILED" in upper or "FATAL" in upper:
        return LogLevel.ERROR
    if "WARN" in upper:
        return LogLevel.WARNING
    if "INFO" in upper:
        return LogLevel.INFO
    if "DEBUG" in upper or "TRACE" in upper:
        return LogLevel.DEBUG
    return None


def _parse_text_line(line: str, number: int) -> LogEntry:
    line_stamp = f"line-{number}"

    bracket = _bracket_level(line)
    if bracket is not None:
        return LogEntry(line_stamp, parse_level(bracket[0]), bracket[1], "kubernetes")

    for extractor, source in (
        (_iso_log, "app"),
        (_bracket_timestamp_log, "app"),
        (_container_log, "container"),
    ):
        found = extractor(line)
        if found is not None:
            timestamp, level, message = found
            return LogEntry(timestamp, parse_level(level), message, source)

    level = _level_in_line(line)
    return LogEntry(line_stamp, level or LogLevel.INFO, line, "raw")


def parse_text_logs(content: str) -> list[LogEntry]:
    """Parse plain-text logs, one entry per non-blank line."""
    entries = []
    for index, raw in enumerate(content.split("\n")):
        line = raw[:-1] if raw.endswith("\r") else raw
        if not line.strip():
            continue
        entries.append(_parse_text_line(line, index + 1))
    return entries


# --- JSON logs -------------------------------------------------------------


def _first_str(record: dict[str, Any], keys: tuple[str, ...], default: str) -> str:
    for key in keys:
        value = record.get(key)
        if isinstance(value, str):
            return value
    return default


def _parse_json_entry(item: Any) -> LogEntry:
    record = item if isinstance(item, dict) else {}
    return LogEntry(
        timestamp=_first_str(record, ("timestamp", "time", "@timestamp"), "unknown"),
        level=parse_level(_first_str(record, ("level", "severity", "loglevel"), "info")),
        message=_first_str(record, ("message", "msg", "text"), "No message"),
        source=_first_str(record, ("source", "logger", "component"), "unknown"),
    )


def parse_json_logs(data: Any) -> list[LogEntry]:
    """Turn decoded JSON (a list of records or a single record) into entries."""
    if isinstance(data, list):
        return [_parse_json_entry(item) for item in data]
    if isinstance(data, dict):
        return [_parse_json_entry(data)]
    raise AppError("Invalid JSON log format")


# --- loading from disk -----------------------------------------------------


def _reject_constant(name: str) -> Any:
    raise ValueError(f"not valid JSON: {name}")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise AppError(f"IO error: {error}") from error


def _parse_content(content: str) -> list[LogEntry]:
    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError:
        return parse_text_logs(content)
    return parse_json_logs(data)


def _scan_component_dir(directory: Path) -> list[LogEntry]:
    """Use the first readable ``.txt`` or ``.log`` file in the component directory."""
    try:
        paths = sorted(directory.iterdir())
    except OSError:
        return []
    for path in paths:
        if path.suffix not in (".txt", ".log"):
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        return parse_text_logs(content)
    return []


def _load_component_logs(
    logs_path: Path,
    component_name: str,
    component_type: str,
    namespace: str,
    root: Path,
) -> ComponentLogs:
    base = root / namespace
    candidates = (
        logs_path,
        base / component_name / "logs.txt",
        base / component_name / "log.txt",
        base / "logs" / f"{component_name}.log",
        base / "logs" / f"{component_name}.txt",
        base / f"{component_name}-logs.txt",
        base / f"{component_type.lower()}-{component_name}" / "logs.txt",
    )

    entries: list[LogEntry] | None = None
    for path in candidates:
        if path.exists():
            entries = _parse_content(_read_text(path))
            break
    if entries is None:
        entries = _scan_component_dir(base / component_name)

    # Newest first by timestamp text; ties keep their file order.
    entries = sorted(entries, key=lambda entry: entry.timestamp, reverse=True)
    return ComponentLogs(
        component_name=component_name,
        component_type=component_type,
        namespace=namespace,
        entries=entries,
        total_entries=len(entries),
    )


def load_pod_logs(
    namespace: str, pod_name: str, root: str | Path = DEFAULT_ROOT
) -> ComponentLogs:
    """Load the logs of a pod from ``<root>/<namespace>/<pod>/logs.txt`` or a fallback."""
    root = Path(root)
    logs_path = root / namespace / pod_name / "logs.txt"
    return _load_component_logs(logs_path, pod_name, "Pod", namespace, root)


def _sorted_dirs(directory: Path) -> list[Path]:
    try:
        return sorted(path for path in directory.iterdir() if path.is_dir())
    except OSError:
        return []


def load_deployment_logs(
    namespace: str, deployment_name: str, root: str | Path = DEFAULT_ROOT
) -> ComponentLogs:
    """Load a deployment's logs, falling back to the first pod whose name it prefixes."""
    root = Path(root)
    namespace_dir = root / namespace
    logs_path = namespace_dir / deployment_name / "logs.txt"

    if not logs_path.exists():
        for pod_dir in _sorted_dirs(namespace_dir):
            if pod_dir.name.startswith(deployment_name):
                return _load_component_logs(
                    namespace_dir / pod_dir.name / "logs.txt",
                    pod_dir.name,
                    "Pod",
                    namespace,
                    root,
                )

    return _load_component_logs(logs_path, deployment_name, "Deployment", namespace, root)


def load_service_logs(
    namespace: str, service_name: str, root: str | Path = DEFAULT_ROOT
) -> ComponentLogs:
    """Load a service's logs from ``<root>/<namespace>/services/<service>/logs.json``."""
    root = Path(root)
    logs_path = root / namespace / "services" / service_name / "logs.json"
    return _load_component_logs(logs_path, service_name, "Service", namespace, root)


# --- querying --------------------------------------------------------------


def filter_logs_by_level(logs: ComponentLogs, min_level: LogLevel) -> list[LogEntry]:
    """Entries at ``min_level`` or more severe."""
    return [entry for entry in logs.entries if entry.level.priority >= min_level.priority]


def search_logs(logs: ComponentLogs, query: str) -> list[LogEntry]:
    """Entries whose message or source contains ``query``, ignoring case."""
    needle = query.lower()
    return [
        entry
        for entry in logs.entries
        if needle in entry.message.lower() or needle in entry.source.lower()
    ]