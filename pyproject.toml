[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rippledata"
version = "0.1.0"
description = "Data types, binary encodings and ledger index helpers for XRP Ledger data"
requires-python = ">=3.10"
dependencies = []
keywords = ["xrp", "ledger", "serialization", "binary", "amounts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rippledata"]

[tool.pytest.ini_options]
addopts = "-ra"
