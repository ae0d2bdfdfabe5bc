[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moonlibk"
version = "0.1.0"
description = "Small kernel-library toolkit: printf-style formatting, string helpers, bitmaps, boot-protocol parsing and a framebuffer model"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "bitmap", "stivale2", "framebuffer", "kernel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
packages = ["moonlibk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
