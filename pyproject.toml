[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goxlr"
version = "0.1.0"
description = "Device protocol encoding and microphone profile handling for GoXLR audio mixers"
requires-python = ">=3.10"
dependencies = []
keywords = ["goxlr", "audio", "mixer", "usb", "microphone", "profile"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goxlr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
