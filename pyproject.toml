[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curler"
version = "1.0.0"
description = "A small HTTP client with a chainable request builder, Set-Cookie parsing, and synchronous or callback-driven requests."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "cookies", "builder", "callbacks", "threads"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
curler = "curler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["curler"]

[tool.hatch.build.targets.sdist]
include = ["curler", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
