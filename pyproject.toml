[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterations"
version = "0.1.0"
description = "A small top-down tile-map game built on an entity-component-system core"
requires-python = ">=3.10"
keywords = ["game", "ecs", "tilemap", "pygame", "entity-component-system", "tiled"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
iterations = "iterations.app:main"

[tool.hatch.build.targets.wheel]
packages = ["iterations"]

[tool.pytest.ini_options]
addopts = "-ra"
