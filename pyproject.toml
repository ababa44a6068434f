[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplemath"
version = "0.1.0"
description = "Expression trees, evaluation and TeX/Wolfram rendering for a small symbolic math language, with number-theory helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "symbolic", "number-theory", "fibonacci", "factorial", "prime-sum", "tex", "wolfram"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["simplemath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
