[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laminar"
version = "0.1.0"
description = "Building blocks of a semi-reliable UDP protocol: acknowledgment, fragmentation, ordering and sequencing."
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "networking", "games", "reliability", "ordering", "sequencing", "fragmentation"]
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
    "Topic :: System :: Networking",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["laminar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
