[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexdemos"
version = "0.15.0"
description = "Small tokenizer-driven programs: a Brainfuck interpreter, a calculator, a JSON parser and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "interpreter", "parser", "json", "brainfuck", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lexdemos-brainfuck = "lexdemos.brainfuck:main"
lexdemos-calculator = "lexdemos.calculator:main"
lexdemos-positions = "lexdemos.positions:main"
lexdemos-json = "lexdemos.jsonparse:main"

[tool.hatch.build.targets.wheel]
packages = ["lexdemos"]

[tool.hatch.build.targets.sdist]
include = ["lexdemos", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
