[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitforge"
version = "1.0.0"
description = "A small frame-paced engine core with pluggable subsystems, a frame timer and console logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["engine", "game-loop", "subsystem", "frame-timer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitforge = "bitforge.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bitforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
