[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "groundwork"
version = "2.0.0"
description = "Foundation utilities: concurrency primitives, worker pools, sequencers, error types, version handling and PEM helpers"
requires-python = ">=3.10"
keywords = [
    "concurrency",
    "worker-pool",
    "sequencer",
    "copy-on-write",
    "semaphore",
    "semver",
    "pem",
    "x509",
    "utilities",
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
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
half-close-test = "groundwork.halfclose:main"

[tool.hatch.build.targets.wheel]
packages = ["groundwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
