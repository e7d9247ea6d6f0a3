[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casheer"
version = "0.1.0"
description = "Domain model, configuration and storage helpers for a personal budgeting API tracking entries, expenses and debts."
requires-python = ">=3.10"
dependencies = []
keywords = ["budget", "expenses", "debts", "accounting", "finance"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["casheer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
