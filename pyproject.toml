[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dolyeyes"
version = "0.1.0"
description = "Cartoon robot eye rendering and expression animations as 24-bit RGB frames for a pair of 240x240 screens"
requires-python = ">=3.10"
dependencies = []
keywords = ["robot", "eyes", "animation", "raster", "expressions", "rgb"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dolyeyes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
