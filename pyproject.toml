[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ws2812tool"
version = "0.1.0"
description = "Drive WS2812 LED strips through a serial port: encoding, animations, manual colour control and settings"
requires-python = ">=3.10"
keywords = ["ws2812", "neopixel", "led", "serial", "uart"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Serial",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ws2812tool = "ws2812tool.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ws2812tool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
