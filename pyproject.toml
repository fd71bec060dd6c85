[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pancake_run"
version = "0.1.0"
description = "A side-scrolling endless runner with jumping, double jumping and sliding on a scrolling tile track."
requires-python = ">=3.10"
keywords = ["game", "runner", "side-scroller", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pancake-run = "pancake_run.main_game:main"

[tool.hatch.build.targets.wheel]
packages = ["pancake_run"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
