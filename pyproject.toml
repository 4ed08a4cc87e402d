[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solidprinciples"
version = "0.1.0"
description = "Small, runnable examples of SOLID design principles"
requires-python = ">=3.10"
dependencies = []
keywords = ["solid", "design-principles", "education", "examples", "oop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solidprinciples"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
