[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orchestrion"
version = "1.0.0"
description = "Command-line option parsing and external device primitives for the Orchestrion score player"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "audio", "devices", "music", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orchestrion = "orchestrion.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["orchestrion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
