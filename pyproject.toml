[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabframe"
version = "0.1.0"
description = "A small column-oriented data frame with typed columns, CSV loading, filtering, merging and column operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["dataframe", "table", "csv", "columns", "data analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tabframe = "tabframe.cli:main"
tabframe-basic = "tabframe.basic:main"

[tool.hatch.build.targets.wheel]
packages = ["tabframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
