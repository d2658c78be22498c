[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acidkit"
version = "0.1.0"
description = "Building blocks for network services: byte buffers, varints, typed YAML configuration, HTTP message types and small containers"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["bytearray", "varint", "zigzag", "config", "yaml", "http", "lru", "queue"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["acidkit"]

[tool.pytest.ini_options]
addopts = "-ra"
