[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbuswire"
version = "0.1.0"
description = "Building blocks for D-Bus wire handling: error codes, aligned basic type I/O, nesting limits, SHA-1/HMAC and peer-link locking."
requires-python = ">=3.10"
dependencies = []
keywords = ["dbus", "d-bus", "ipc", "serialization", "sha1", "hmac"]
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
packages = ["dbuswire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
