[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "vidd"
version = "0.1.0"
description = "Core building blocks of a modal terminal text editor: line chains, buffers, selections, styles, frame buffers, file browsing and search helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "framebuffer", "fuzzy-finder"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["vidd*"]

[tool.pytest.ini_options]
addopts = "-ra"
