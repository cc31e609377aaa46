[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsgoipc"
version = "0.1.0"
description = "Client for the tsgo API server: MessagePack framing over stdio, file-system callbacks and virtual file systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["typescript", "tsgo", "ipc", "msgpack", "virtual-file-system"]
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
packages = ["tsgoipc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
