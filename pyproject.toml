[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jotpad"
version = "0.1.0"
description = "A small Tkinter notebook editor with encoding selection, font zoom and current-line highlighting"
requires-python = ">=3.10"
keywords = ["editor", "notepad", "text", "tkinter", "encoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jotpad = "jotpad.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["jotpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
