[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "checkedcases"
version = "0.1.0"
description = "Small self-verifying computations: each case derives an answer, explains it, and checks it independently."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collatz",
    "goldbach",
    "kaprekar",
    "fibonacci",
    "sudoku",
    "durand-kerner",
    "rule-based reasoning",
    "verification",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
checkedcases-collatz = "checkedcases.collatz:main"
checkedcases-control-system = "checkedcases.control_system:main"
checkedcases-deep-taxonomy = "checkedcases.deep_taxonomy:main"
checkedcases-euler-identity = "checkedcases.euler_identity:main"
checkedcases-fibonacci = "checkedcases.fibonacci:main"
checkedcases-matrix-mechanics = "checkedcases.matrix_mechanics:main"
checkedcases-goldbach = "checkedcases.goldbach:main"
checkedcases-kaprekar = "checkedcases.kaprekar:main"
checkedcases-pn-junction = "checkedcases.pn_junction:main"
checkedcases-transistor-switch = "checkedcases.transistor_switch:main"
checkedcases-polynomial = "checkedcases.polynomial:main"
checkedcases-gps = "checkedcases.gps:main"
checkedcases-odrl-risk = "checkedcases.odrl_risk:main"
checkedcases-sudoku = "checkedcases.sudoku:main"

[tool.hatch.build.targets.wheel]
packages = ["checkedcases"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
