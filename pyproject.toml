[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssixwallet"
version = "0.1.0"
description = "Data models and rules for an SSIX wallet front end: remote nodes, address book, peer connections, outputs, optimization settings and dialog helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptocurrency", "wallet", "cryptonote", "address-book", "outputs"]
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
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ssixwallet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
