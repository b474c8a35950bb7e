[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokedexcli"
version = "0.1.0"
description = "An interactive command-line Pokedex: browse location areas, explore them, catch and inspect Pokemon."
requires-python = ">=3.10"
keywords = ["pokedex", "pokemon", "pokeapi", "repl", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
pokedexcli = "pokedexcli.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["pokedexcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
disallow_untyped_defs = true
