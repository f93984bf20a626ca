[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minidb"
version = "0.1.0"
description = "A tiny in-memory table store that saves each table to a plain-text .tbl file"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "table", "storage", "flat-file"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minidb-demo = "minidb.main:main"

[tool.hatch.build.targets.wheel]
packages = ["minidb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
