[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "horus_ui"
version = "1.1.2"
description = "Editing state and text layout for a terminal statusline configurator: colour picker, icon selector, separator editor, help and theme bars."
requires-python = ">=3.10"
dependencies = []
keywords = ["statusline", "terminal", "tui", "configurator", "colors"]
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
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["horus_ui"]

[tool.pytest.ini_options]
addopts = "-ra"
