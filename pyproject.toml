[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bundlebash"
version = "0.1.0"
description = "A small arcade game: guide Bix around a field and eat the bouncing fruit."
requires-python = ">=3.10"
keywords = ["game", "arcade", "ecs", "pygame", "particles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bundlebash = "bundlebash.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bundlebash"]

[tool.pytest.ini_options]
addopts = "-ra"
