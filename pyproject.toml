[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradingsystem"
version = "0.1.0"
description = "Automatic stock trading over interchangeable broker drivers"
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "stocks", "broker", "driver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tradingsystem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
