[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagesim"
version = "0.1.0"
description = "Simulate virtual-memory page replacement (FIFO, LRU, CLOCK, OPT) over memory access traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "virtual memory", "page replacement", "simulation", "operating systems", "LRU", "FIFO"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagesim = "pagesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pagesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
