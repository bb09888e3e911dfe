[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "havenapi"
version = "0.1.0"
description = "Small web services: suggestion voting, idea boards, notes, file uploads, leaderboards, name statistics and singleplayer pack sharing"
requires-python = ">=3.10"
keywords = [
    "web",
    "flask",
    "voting",
    "notes",
    "uploads",
    "leaderboard",
    "baby-names",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Typing :: Typed",
]
dependencies = [
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
]

[project.scripts]
havenapi-updatenames = "havenapi.babynames:main"

[tool.hatch.build.targets.wheel]
packages = ["havenapi"]

[tool.hatch.build.targets.sdist]
include = ["havenapi", "tests", "pyproject.toml", "README.md"]

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
