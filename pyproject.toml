[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goveelink"
version = "0.1.0"
description = "Device state, model quirks, temperature units and MQTT topic helpers for Govee smart home devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["govee", "home-assistant", "mqtt", "smart-home", "lights"]
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
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["goveelink"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
