[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joyconf"
version = "1.7.1"
description = "Configuration model for a programmable joystick controller: pins, buttons, encoders, LEDs and shift registers"
requires-python = ">=3.10"
dependencies = []
keywords = ["joystick", "configurator", "embedded", "game-controller", "pins", "encoders"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["joyconf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
