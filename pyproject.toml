[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluentkit"
version = "1.0.0"
description = "Fluent design enumerations and icon glyphs, plus Micro QR Code frame, bit stream and masking primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["fluent", "icons", "qr code", "micro qr", "masking", "bitstream"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluentkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
