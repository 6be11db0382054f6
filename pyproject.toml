[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ktbgame"
version = "1.0.0"
description = "KTB! - Kill The Bullies!: a raycasting first-person shooter with portals, enemies and a boss fight"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "fps", "pygame", "portals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ktbgame = "ktbgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ktbgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
