[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballance_tas"
version = "1.6.0"
description = "Deterministic input scripting, event dispatch and on-screen display data for Ballance tool-assisted runs"
requires-python = ">=3.10"
dependencies = []
keywords = ["ballance", "tas", "speedrun", "input", "replay", "events"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ballance_tas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
