[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitools"
version = "0.1.0"
description = "Small command-line tools: metro trip planner, palindrome and operator puzzles, clinic scheduler, bank deposits and a BMP image editor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "metro",
    "palindrome",
    "puzzle",
    "scheduling",
    "bank",
    "bmp",
    "image-filters",
    "cli",
]
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
    "Topic :: Utilities",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metro-trip = "minitools.metro:main"
letter-palindrome = "minitools.palindrome:main"
find-operators = "minitools.operators:main"
image-editor = "minitools.imageeditor:main"
clinic-schedule = "minitools.clinic:main"
bank-deposits = "minitools.bank:main"

[tool.hatch.build.targets.wheel]
packages = ["minitools"]

[tool.hatch.build.targets.sdist]
include = ["minitools", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
