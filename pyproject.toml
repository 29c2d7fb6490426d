[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daniengine"
version = "0.1.0"
description = "A tiny 2D engine with a software pixel canvas, particles, input mapping and immediate-mode UI"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game-engine", "2d", "particles", "pixel-art", "immediate-mode-ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
daniengine-playground = "daniengine.playground:main"
daniengine-particles = "daniengine.particles_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["daniengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
