[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "academia"
version = "3.0.0"
description = "Interactive console system for managing secondary-school students, courses and grades"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "students", "grades", "ranking", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
academia = "academia.cli:main"
academia-legacy = "academia.legacy.app:main"

[tool.hatch.build.targets.wheel]
packages = ["academia"]

[tool.pytest.ini_options]
addopts = "-ra"
