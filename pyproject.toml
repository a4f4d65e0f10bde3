[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aperiodic-tiles"
version = "0.1.0"
description = "Outlines of Penrose kite and dart, hat and ghost tiles, simple tilings of them, and SVG/PNG output"
requires-python = ">=3.10"
dependencies = [
    "pillow",
    "defusedxml",
]
keywords = ["tiling", "penrose", "aperiodic", "hat", "ghost", "geometry", "svg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aperiodic-tiles = "aperiodic_tiles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aperiodic_tiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
