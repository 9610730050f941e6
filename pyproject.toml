[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recursia"
version = "0.1.0"
description = "Recursive drawing, colour, font, text layout and console helpers for teaching recursion"
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "education", "geometry", "color", "text layout", "chi-squared"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["recursia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
