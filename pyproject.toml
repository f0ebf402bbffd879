[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reflexkit"
version = "0.1.0"
description = "Small utilities: ASCII character classes, enum bit operations, error code catalogues, string loading, named records, cartesian powers and declarative command lines."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cli",
    "argument-parsing",
    "error-codes",
    "named-tuple",
    "cartesian-product",
    "utilities",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reflexkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
