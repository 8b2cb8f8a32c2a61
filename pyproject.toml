[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "machinerepair"
version = "0.1.0"
description = "Users, machines, repair services and repair orders for a machine repair shop, stored in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["repair", "orders", "workshop", "machines", "sqlite"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["machinerepair*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
