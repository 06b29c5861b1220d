[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vaultscan"
version = "0.1.0"
description = "Detect exposed AI provider API keys in text, cache results per file, and draw findings in a curses dashboard"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "secrets",
    "secret-scanning",
    "api-keys",
    "credentials",
    "security",
    "curses",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Quality Assurance",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
generate-mock-env-fixtures = "vaultscan.env_fixtures:main"
delete-mock-env-fixtures = "vaultscan.delete_fixtures:main"

[tool.hatch.build.targets.wheel]
packages = ["vaultscan"]

[tool.hatch.build.targets.sdist]
include = ["vaultscan", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
check_untyped_defs = true
