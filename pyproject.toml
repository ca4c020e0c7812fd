[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aetherbind"
version = "0.1.0"
description = "Generate Aether language bindings from C header files"
requires-python = ">=3.10"
dependencies = []
keywords = ["aether", "bindings", "c", "header", "code-generation", "ffi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aetherc = "aetherbind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aetherbind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
