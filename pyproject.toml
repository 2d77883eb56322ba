[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmcore"
version = "0.1.0"
description = "Core components for a competition robot controller: game enums, CRC16 framing, serial link, behaviour logic and timing helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "crc16", "serial", "embedded", "threading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
packages = ["rmcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
