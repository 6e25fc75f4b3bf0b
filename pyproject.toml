[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uhppote-core"
version = "0.1.0"
description = "Value types, wire and JSON encodings, and UDP/TCP transport for UHPPOTE UT0311-L0x access controllers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "uhppote",
    "access-control",
    "ut0311",
    "bcd",
    "udp",
    "controller",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uhppote_core"]

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
