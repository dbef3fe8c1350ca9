[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ironbeam-client"
version = "0.2.0"
description = "Building blocks for the Ironbeam futures trading API: order requests, simulated-account requests, response models and WebSocket streaming"
requires-python = ">=3.10"
keywords = ["futures", "trading", "ironbeam", "finance", "async", "websocket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]
dependencies = [
    "websockets>=12",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
]

[tool.hatch.build.targets.wheel]
packages = ["ironbeam_client"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
