[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfasm"
version = "0.1.0"
description = "A Brainfuck compiler that emits x86-64 Linux assembly and can assemble and link it into an executable."
requires-python = ">=3.10"
dependencies = []
keywords = ["brainfuck", "compiler", "assembly", "x86-64"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bf = "bfasm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bfasm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
