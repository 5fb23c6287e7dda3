[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termframe"
version = "0.1.0"
description = "A small terminal UI toolkit: cell buffers, constraint layouts and ready-made widgets with diffed redraws."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["terminal", "tui", "widgets", "layout", "console", "progress-bar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termframe-demo = "termframe.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["termframe"]

[tool.hatch.build.targets.sdist]
include = [
    "termframe",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
