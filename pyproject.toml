[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argtab"
version = "0.1.0"
description = "Command-line argument definitions (flag, integer, string, regex and remark) that count and validate their own values, with a small regex engine, a hash table and a merge sort."
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "arguments", "options", "validation", "regex"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["argtab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
