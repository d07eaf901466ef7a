[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolvers"
version = "0.1.0"
description = "Solutions to classic competitive programming problems as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "dynamic-programming", "greedy", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolvers = "cpsolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolvers"]

[tool.pytest.ini_options]
addopts = "-ra"
