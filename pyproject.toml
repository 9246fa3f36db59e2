[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecrt"
version = "0.1.0"
description = "A small runtime of status codes, allocators, buffers and pluggable byte streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["runtime", "streams", "io", "buffer", "allocator", "file-descriptor", "status-codes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecrt-echo = "ecrt.echo:main"
ecrt-helloworld = "ecrt.helloworld:main"

[tool.hatch.build.targets.wheel]
packages = ["ecrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
