[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmlemit"
version = "0.1.0"
description = "Streaming XML event writer with optional indentation"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "writer", "events", "streaming", "indentation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xmlemit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
