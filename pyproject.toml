[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadcc"
version = "0.1.0"
description = "Compiler back-end pieces: value types, parameter lists, a quadruple IR and a pseudo-assembly emitter"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "quadruples", "intermediate representation", "three-address code", "assembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadcc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
