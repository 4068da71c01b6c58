[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timecfg"
version = "0.1.0"
description = "Read, write and maintain the INI configuration of a desktop countdown and pomodoro timer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "configuration",
    "ini",
    "timer",
    "pomodoro",
    "countdown",
    "hotkeys",
    "localization",
]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timecfg"]

[tool.hatch.build.targets.sdist]
include = ["timecfg", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
