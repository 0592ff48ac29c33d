[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpcframe"
version = "0.1.0"
description = "JSON-RPC 2.0 request, response and batch message objects"
requires-python = ">=3.10"
keywords = ["json-rpc", "rpc", "json", "batch", "protocol"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rpcframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
