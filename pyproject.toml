[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciiviz"
version = "0.1.0"
description = "ASCII music visualizers that draw audio data onto an in-memory character canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "visualizer", "audio", "spectrum", "waveform", "particles", "canvas"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asciiviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
