[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopherlab"
version = "0.1.0"
description = "Small concurrency patterns: producer/consumer, caches, worker pools, dining gophers and rate limiters"
requires-python = ">=3.10"
dependencies = []
keywords = ["concurrency", "threading", "cache", "rate-limiter", "worker-pool", "semaphore"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
gopherlab = "gopherlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gopherlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
