[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petal"
version = "0.1.0"
description = "A small configurable lexer: declare keywords, symbols and token classes, then tokenize text."
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "scanner", "tokens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
petal = "petal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["petal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
