[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tagexpand"
version = "0.1.0"
description = "Expand compact abbreviations into indented HTML and JSX markup"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "jsx", "abbreviation", "snippet", "markup"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tagexpand"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
