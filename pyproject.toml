[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barcodecloud"
version = "0.1.0"
description = "HTTP client building blocks and option sets for a cloud barcode REST API"
requires-python = ">=3.10"
dependencies = [
    "requests>=2.28",
]
keywords = ["barcode", "qr", "recognition", "generation", "rest", "api", "client"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["barcodecloud"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
