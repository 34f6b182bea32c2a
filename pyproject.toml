[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintshapes"
version = "0.1.0"
description = "A small paint model with pencil, eraser, shape tools, colour palette and undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["paint", "drawing", "shapes", "canvas", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paintshapes = "paintshapes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["paintshapes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
