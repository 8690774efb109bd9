[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "databoard"
version = "0.1.1"
description = "A hierarchical, thread-safe key-value store with remapping between boards"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackboard", "data", "key", "value", "store", "hierarchical"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["databoard"]

[tool.pytest.ini_options]
addopts = "-ra"
