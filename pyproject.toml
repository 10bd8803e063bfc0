[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nurbskit"
version = "0.1.0"
description = "Bezier, B-spline and NURBS evaluation routines for curves and surfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["nurbs", "b-spline", "bezier", "de casteljau", "geometry", "splines"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["nurbskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
