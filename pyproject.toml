[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omni_palette"
version = "0.1.0"
description = "Command palette logic: result selection, toggle geometry, extension catalog search and settings layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["command palette", "shortcuts", "extensions", "catalog", "settings"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["omni_palette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
