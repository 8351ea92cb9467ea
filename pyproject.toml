[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiktparse"
version = "0.1.0"
description = "A parser for wiki markup: templates, headers, wikilinks, external links, tags, comments and nowiki sections."
requires-python = ">=3.10"
dependencies = []
keywords = ["wiki", "wikitext", "markup", "parser", "mediawiki", "wiktionary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiktparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
