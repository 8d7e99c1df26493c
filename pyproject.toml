[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todolist"
version = "0.1.0"
description = "An interactive console to-do list with undo, sorting, autosave and text export"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "cli", "console", "undo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todolist = "todolist.app:main"

[tool.hatch.build.targets.wheel]
packages = ["todolist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
