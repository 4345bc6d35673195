"""Terminal browser and analyzer for Kubernetes cluster dumps."""

__version__ = "1.0.0"