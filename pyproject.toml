[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qniokit"
version = "0.1.0"
description = "Building blocks for network I/O code: base64, FIFO queues, I/O vectors, JSON trees, ring buffers, backoff and reader-writer locks"
requires-python = ">=3.10"
dependencies = []
keywords = ["base64", "fifo", "iovec", "json", "ring-buffer", "rwlock", "brlock", "backoff", "networking"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qniokit"]

[tool.pytest.ini_options]
addopts = "-ra"
