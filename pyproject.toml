[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kubecapy"
version = "1.0.0"
description = "A terminal browser and analyzer for Kubernetes cluster dumps, with a capybara easter egg"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "k8s", "cluster", "logs", "terminal", "tui", "analyzer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kubecapy = "kubecapy.main:main"

[tool.hatch.build.targets.wheel]
packages = ["kubecapy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
