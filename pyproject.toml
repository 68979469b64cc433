[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oralmath"
version = "0.1.0"
description = "Mental arithmetic quiz system for teachers and students, backed by plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["arithmetic", "quiz", "education", "mental-math", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oralmath = "oralmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oralmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
