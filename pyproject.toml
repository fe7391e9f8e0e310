[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "camhelper"
version = "0.1.0"
description = "Tool lists, tool set-up sheets and table layout for CNC machining projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "machining", "tools", "magazine", "setup sheet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Manufacturing",
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
packages = ["camhelper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
