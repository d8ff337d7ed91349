[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobakit"
version = "0.1.0"
description = "Small 2D game toolkit: vectors, grid points, transforms, outline polygons, colors and Perlin noise"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "vector", "color", "hsv", "perlin", "noise", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mobakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
