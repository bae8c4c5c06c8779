[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atmsim"
version = "0.1.0"
description = "A small interactive ATM simulator for the terminal, with accounts, PIN checks, deposits, withdrawals and transaction history."
requires-python = ">=3.10"
dependencies = []
keywords = ["atm", "bank", "simulator", "terminal", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atmsim = "atmsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["atmsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
