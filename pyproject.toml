[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avaliauni"
version = "0.1.0"
description = "Console menu where students review institutions and institutions manage their profiles, stored in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["reviews", "universities", "students", "institutions", "console", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
avaliauni = "avaliauni.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["avaliauni"]

[tool.pytest.ini_options]
addopts = "-ra"
