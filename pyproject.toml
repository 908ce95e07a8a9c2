[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homedevices"
version = "0.1.0"
description = "Simulated smart-home thermometer and power socket with a terminal dashboard server"
requires-python = ">=3.10"
dependencies = []
keywords = ["home automation", "thermometer", "socket", "asyncio", "tcp", "dashboard", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
homedevices-server = "homedevices.server:main"
homedevices-socket = "homedevices.controller:main_socket"
homedevices-termometer = "homedevices.controller:main_termometer"

[tool.hatch.build.targets.wheel]
packages = ["homedevices"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
