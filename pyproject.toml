[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forcegraph"
version = "0.9.1"
description = "Force-directed graph layout with DOT, GML, JSON Graph and SVG output"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "force", "directed", "layout", "visualization", "svg", "gml", "dot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["forcegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
