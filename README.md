# kubecapy

A terminal browser for a dump of a Kubernetes cluster. It reads the JSON
exports and log files that were saved to disk, flags unhealthy pods and
deployments, and lets you page through component logs with level filters.
There is also a capybara hidden in the main menu.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What it expects on disk

Run it from a directory that holds an `output/` directory laid out by
namespace:

```
output/
├── namespace1/
│   ├── pods.json
│   ├── deployments.json
│   └── some-pod-name/
│       └── logs.txt
└── namespace2/
```

`pods.json` and `deployments.json` are the usual `items` lists as exported
from the cluster. A component's logs may be in `logs.txt`, `log.txt` or
`logs.json` inside a directory named after it; plain-text and JSON logs are
both understood.

## Running

```
kubecapy
```

If `output/` is missing it says so and exits with status 1.

### Keys

| Key        | Action                                                  |
|------------|---------------------------------------------------------|
| ↑ / ↓      | Move the selection, or scroll logs and details          |
| Enter      | Open the selected item                                  |
| Esc        | Go back one screen; on the main menu, quit              |
| q          | Quit                                                    |
| l          | From a component's details, open its logs               |
| f          | In the log viewer, cycle error → warning → info → debug → all |
| e, w, i, d | In the log viewer, show only that level (again to clear) |
| a          | In the log viewer, show all levels                      |

### Screens

- **Cluster Analysis** – every namespace with its pods and deployments,
  marked green when healthy. Select one to see its details.
- **Browse Namespaces** – pick a namespace, then view its pods, its
  deployments or the components that have logs.
- **Capybara Easter Egg** – a moment of calm.

## Using it as a library

The loaders and log parsers can be used on their own:

```python
from pathlib import Path

from kubecapy.kubernetes import analyze_cluster
from kubecapy.logs import LogLevel, filter_logs_by_level, load_pod_logs

root = Path("output")

analysis = analyze_cluster(root)
print(analysis.total_pods, analysis.total_deployments, analysis.total_issues)
for namespace in analysis.namespaces:
    for issue in namespace.issues:
        print(issue.severity, issue.description)

logs = load_pod_logs("cert-manager", "cert-manager-cainjector", root)
print(logs.error_count(), logs.warning_count())
for entry in filter_logs_by_level(logs, LogLevel.WARNING):
    print(entry.timestamp, entry.level.label(), entry.message)
```

`analyze_cluster` reports a pod as a warning when it is not ready or not
running, and a deployment as a warning when fewer replicas are ready than
desired, or as critical when none are.