[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxhash"
version = "0.1.0"
description = "Pure-Python Blake2b, a Blake2b-driven byte generator and AES-round hashing primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["blake2b", "aes", "hash", "proof-of-work", "generator"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rxhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
