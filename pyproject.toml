[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phronima"
version = "0.1.0"
description = "A small stack language with a simulator and a compiler to Brainfuck"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack language", "compiler", "brainfuck", "interpreter", "esolang"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
phronima = "phronima.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["phronima"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
