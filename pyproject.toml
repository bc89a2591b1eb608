[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exprasm"
version = "0.1.0"
description = "Compile one-line arithmetic statements over x, y and z into a small register-machine assembly, and run that assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "assembly", "expression", "parser", "code generation", "interpreter"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exprasm = "exprasm.cli:main"
exprasm-run = "exprasm.machine:main"

[tool.hatch.build.targets.wheel]
packages = ["exprasm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
