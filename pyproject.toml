[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gitcurses"
version = "0.1.0"
description = "A curses terminal front end for everyday git commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "curses", "terminal", "tui", "version-control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gitcurses = "gitcurses.app:main"

[tool.setuptools.packages.find]
include = ["gitcurses*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
