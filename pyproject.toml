[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zephyrus"
version = "0.1.0"
description = "Vector, matrix and quaternion maths with axis-aligned collision detection and resolution for small game engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "quaternion", "aabb", "collision", "physics", "game-engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zephyrus"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
