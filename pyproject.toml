[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unkr"
version = "0.1.0"
description = "Encrypt, decrypt and brute-force classical ciphers such as Vigenere, transposition and Enigma"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "cipher",
    "vigenere",
    "enigma",
    "transposition",
    "brute-force",
    "kryptos",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unkr"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
