[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cactpot"
version = "0.1.0"
description = "Mini Cactpot solver: possible line sums, payouts and the best line to pick"
requires-python = ">=3.10"
dependencies = []
keywords = ["cactpot", "mini-cactpot", "lottery", "solver", "payout", "game"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cactpot = "cactpot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cactpot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
files = ["cactpot"]
