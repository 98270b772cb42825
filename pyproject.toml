[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsplitter"
version = "0.1.0"
description = "Split a file into numbered block files, optionally zlib-compressed, and join them back."
requires-python = ">=3.10"
dependencies = []
keywords = ["split", "join", "chunks", "zlib", "archiving"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fsplitter = "fsplitter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fsplitter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
