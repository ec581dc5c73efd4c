[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbox"
version = "0.1.0"
description = "Small utilities: string unpacking, word frequency, LRU cache, parallel runner, pipelines, file copying, envdir, domain stats and rule-based validation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lru-cache",
    "pipeline",
    "envdir",
    "validation",
    "word-frequency",
    "file-copy",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbox-hello = "taskbox.hello:main"
taskbox-copy = "taskbox.filecopy:main"
taskbox-envdir = "taskbox.envdir:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
