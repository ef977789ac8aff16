[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfdrills"
version = "0.1.0"
description = "Solutions to classic short programming-contest exercises, as a small Python library and command"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "exercises", "algorithms", "practice", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cfdrills = "cfdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cfdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
