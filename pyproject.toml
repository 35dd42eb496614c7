[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizbuild"
version = "0.0.6"
description = "Verify quiz questions by compiling and running them, render them to a JavaScript data file, and serve the site locally"
requires-python = ">=3.10"
keywords = ["quiz", "rust", "education", "static-site", "markdown"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
dependencies = [
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quizbuild = "quizbuild.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizbuild"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
