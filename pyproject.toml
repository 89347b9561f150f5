[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handmade"
version = "0.1.0"
description = "A small hand-built game loop with a gradient renderer, square-wave audio and simple physics"
requires-python = ">=3.10"
keywords = ["game", "game-loop", "pygame", "audio", "physics", "square-wave"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
handmade = "handmade.main:main"

[tool.hatch.build.targets.wheel]
packages = ["handmade"]

[tool.pytest.ini_options]
addopts = "-ra"
