[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boltwatch"
version = "0.1.0"
description = "Snapshot analysis for key/value database buckets: deltas, diffs, digests, labels, alerts, history and exports."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "buckets", "monitoring", "snapshot", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boltwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
