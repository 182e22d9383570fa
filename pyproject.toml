[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplc"
version = "0.1.0"
description = "Scanner, symbol table and diagnostics for the KPL teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["kpl", "compiler", "scanner", "lexer", "symbol-table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kplc-scan = "kplc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kplc"]

[tool.pytest.ini_options]
addopts = "-ra"
