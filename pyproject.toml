[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libmx"
version = "0.1.0"
description = "Small utility library of string, number, byte-buffer, sorting, linked-list and I/O helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "utilities", "linked list", "sorting", "hex", "line reader"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libmx-print-args = "libmx.print_args:main"

[tool.hatch.build.targets.wheel]
packages = ["libmx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
