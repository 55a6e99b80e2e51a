[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenebot"
version = "0.1.0"
description = "Building blocks for driving a user interface from tests: item paths, scene interfaces, query commands answered through futures, and RPC value conversion."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ui-testing",
    "gui-automation",
    "item-path",
    "xml-rpc",
    "test-automation",
]
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
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenebot"]

[tool.hatch.build.targets.sdist]
include = ["scenebot", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
