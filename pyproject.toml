[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Small algorithm drills: base conversion, number puzzles, text exercises, Big O examples and simple in-place sorts."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "exercises",
    "sorting",
    "bubble-sort",
    "insertion-sort",
    "big-o",
    "base-conversion",
    "fibonacci",
    "gcd",
    "fizzbuzz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodrills-gcd = "algodrills.gcd_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.hatch.build.targets.sdist]
include = ["algodrills", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["algodrills"]
warn_unused_ignores = true
