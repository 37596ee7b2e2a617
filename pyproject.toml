[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lights"
version = "0.1.0"
description = "Game toolkit: 2D collision world, binary packing, type generation, mesh helpers and a login server"
requires-python = ">=3.11"
keywords = [
    "game",
    "collision",
    "physics",
    "binary",
    "serialization",
    "code-generation",
    "server",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
    "pymongo",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
lights-typegen = "lights.typegen_cli:main"
lights-server = "lights.server_game:main"

[tool.hatch.build.targets.wheel]
packages = ["lights"]

[tool.hatch.build.targets.sdist]
include = ["lights", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
