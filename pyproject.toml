[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchpad"
version = "0.1.0"
description = "Byte and string helpers, a small book list, and a plain TCP file-transfer client and server"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "bytes", "tokenize", "book list", "file transfer", "sockets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scratchpad-books = "scratchpad.books:main"
scratchpad-server = "scratchpad.server:main"
scratchpad-client = "scratchpad.client:main"
scratchpad-menu-server = "scratchpad.menu_server:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchpad"]

[tool.hatch.build.targets.sdist]
include = ["scratchpad", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
