[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minheap"
version = "0.1.0"
description = "A binary min-heap of integers with value removal, counting and live-instance tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "min-heap", "priority queue", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
minheap-demo = "minheap.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["minheap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
