[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "manikinkit"
version = "0.1.0"
description = "Keyframe animation, image effects and small graphics helpers for articulated figures"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["animation", "keyframe", "image", "graphics", "effects"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["manikinkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
