[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subsim"
version = "0.1.0"
description = "Headless underwater scene simulation: a steerable submarine, coral, animated water and a flocking school of boids."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "boids", "flocking", "submarine", "obj", "mesh", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subsim = "subsim.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["subsim"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
