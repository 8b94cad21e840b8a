[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udptictactoe"
version = "0.1.0"
description = "Tic-tac-toe board and rules, with a small UDP join protocol between a game server and its clients"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "udp", "game", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udptictactoe-server = "udptictactoe.server:main"
udptictactoe-client = "udptictactoe.client:main"

[tool.hatch.build.targets.wheel]
packages = ["udptictactoe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
