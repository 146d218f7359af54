[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmv"
version = "1.0.0"
description = "Batch rename files and directories by editing their names in $EDITOR"
requires-python = ">=3.10"
dependencies = []
keywords = ["rename", "batch", "mv", "editor", "files", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gmv = "gmv.cli:main"
gmv-man = "gmv.manpage:main"

[tool.hatch.build.targets.wheel]
packages = ["gmv"]

[tool.pytest.ini_options]
addopts = "-ra"
