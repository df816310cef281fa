[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fenview"
version = "0.1.0"
description = "Parse chess positions in Forsyth-Edwards Notation and show them as a text board"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "fen", "forsyth-edwards", "parser", "board"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fenview = "fenview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fenview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
