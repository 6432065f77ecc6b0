[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrosim"
version = "1.0.0"
description = "Small N-body simulations: a gas of noble-gas particles in a box and a gravitating solar system"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simulation",
    "physics",
    "n-body",
    "gravity",
    "kinetic gas",
    "solar system",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
astrosim-gas = "astrosim.gas.textview:main"
astrosim-solar = "astrosim.solar.textview:main"

[tool.hatch.build.targets.wheel]
packages = ["astrosim"]

[tool.hatch.build.targets.sdist]
include = ["astrosim", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
