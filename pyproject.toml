[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookera-scaffold"
version = "0.1.0"
description = "Interactive terminal tool that scaffolds a new Bookera module from a git template repository."
requires-python = ">=3.10"
keywords = ["bookera", "scaffold", "template", "generator", "cli"]
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
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bookera-scaffold = "bookera_scaffold.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bookera_scaffold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
