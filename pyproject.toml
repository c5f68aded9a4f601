[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxtable"
version = "0.1.0"
description = "Render text tables with box-drawing borders, column spans, wrapping and ANSI styling"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["table", "terminal", "ansi", "box-drawing", "csv", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["boxtable"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
