[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "forkunit"
version = "0.1.0"
description = "A small unit-test runner that runs each test in its own forked process, with C-style string, memory and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["unit-testing", "test-runner", "fork", "isolation", "strings", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: POSIX",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
forkunit = "forkunit.launcher:main"

[tool.setuptools.packages.find]
include = ["forkunit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
