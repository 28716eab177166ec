[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parquette"
version = "0.1.0"
description = "Building blocks for reading Parquet data: page compression codecs, level and plain value decoding, and a ranged remote reader"
requires-python = ">=3.10"
keywords = ["parquet", "columnar", "compression", "snappy", "decoding", "file-format"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "brotli",
    "lz4",
    "zstandard",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["parquette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
