[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cnge"
version = "0.1.0"
description = "Core pieces of a small 2D game framework: math, images, timing, input state, resource loading and scenes"
requires-python = ">=3.10"
keywords = ["game", "framework", "2d", "vector", "matrix", "sprites", "scenes", "resource loading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cnge"]

[tool.hatch.build.targets.sdist]
include = ["cnge", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
