[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tchanz"
version = "0.1.0"
description = "Grid-based ant colony simulation: anthills, collectors, defensors, predators and food"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ants", "artificial life", "grid", "colony"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tchanz = "tchanz.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["tchanz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
