[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glrhi"
version = "0.1.0"
description = "Colours, brushes, 2D cameras, render data records and test-geometry generators for a batched 2D renderer"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["rendering", "camera", "orthographic", "geometry", "test-data", "texture", "ruler"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glrhi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
