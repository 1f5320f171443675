[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aris"
version = "0.1.0"
description = "Logical expression trees, a formula parser, normal forms and equivalence rewriting"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "natural-deduction", "propositional-logic", "first-order-logic", "parser", "cnf", "unification"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
