[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcutils"
version = "0.1.0"
description = "Common utilities: per-thread error state, text and command-line helpers, environment and filesystem helpers, and small containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "error-handling", "filesystem", "containers", "string-map"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["rcutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
