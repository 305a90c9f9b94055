[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftkit"
version = "0.1.0"
description = "Small C-style character, memory, string, list, output, formatting and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "linked-list", "printf", "line-reader", "atoi"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
