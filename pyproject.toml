[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopdesk"
version = "0.1.0"
description = "Interactive console for managing shop orders, clients, products and offers stored in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "orders", "shop", "console", "offers", "reports"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shopdesk = "shopdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shopdesk"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
