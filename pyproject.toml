[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satsearch"
version = "0.1.0"
description = "Boolean satisfiability by hill-climbing and depth-first search, with an instance generator and a solution checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "satisfiability", "cnf", "hill-climbing", "depth-first-search", "search"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
satsearch = "satsearch.solver:main"
satsearch-generate = "satsearch.generate:main"
satsearch-validate = "satsearch.validate:main"

[tool.hatch.build.targets.wheel]
packages = ["satsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
