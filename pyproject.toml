[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jellysim"
version = "0.1.0"
description = "Mass-spring soft-body simulation with body-to-body collisions and a pygame viewer"
requires-python = ">=3.10"
keywords = ["physics", "softbody", "mass-spring", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jellysim = "jellysim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jellysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
