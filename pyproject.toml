[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "klib"
version = "0.1.0"
description = "Low-level utilities: fixed-width 64-bit division, printf-style formatting, ustar headers, bitmaps, linked lists and hash tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bitmap",
    "hash table",
    "linked list",
    "printf",
    "ustar",
    "tar",
    "rc4",
    "prng",
    "heap sort",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["klib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
