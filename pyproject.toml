[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keylyze"
version = "0.1.0"
description = "Keyboard layout helpers: key geometry, scoring weights, layout search, pagination, heatmap data, analysis view state, text reports and corpus settings."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "keyboard",
    "layout",
    "analyzer",
    "heatmap",
    "corpus",
    "typing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["keylyze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
