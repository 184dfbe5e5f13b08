[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laddersim"
version = "0.1.0"
description = "Monte Carlo simulator for snakes and ladders: win rates, average game length and jump usage."
requires-python = ">=3.10"
dependencies = []
keywords = ["snakes and ladders", "simulation", "monte carlo", "board game", "dice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
laddersim = "laddersim.cli:main"
laddersim-walk = "laddersim.walk:main"

[tool.hatch.build.targets.wheel]
packages = ["laddersim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
