[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceimpact"
version = "1.0.0"
description = "A side-scrolling space shooter with two phases, shooting enemies, power-up items and boss fights."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "arcade", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spaceimpact = "spaceimpact.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceimpact"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
