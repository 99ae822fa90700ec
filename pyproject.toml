[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small, tested solutions to classic array, string and arithmetic exercises."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "arrays",
    "strings",
    "kadane",
    "anagram",
    "roman-numerals",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
