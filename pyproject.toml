[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fanburst"
version = "0.1.0"
description = "Click-spawned particle bursts drawn as triangle fans, moved with 2D matrix transforms"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["particles", "pygame", "matrix", "animation", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fanburst = "fanburst.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["fanburst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
