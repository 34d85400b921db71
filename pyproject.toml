[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "mclipboard"
version = "1.0.0"
description = "A clipboard history manager with favorites, backed by SQLite and a Tk window"
requires-python = ">=3.10"
dependencies = []
keywords = ["clipboard", "history", "favorites", "sqlite", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mclipboard = "mclipboard.app:main"

[tool.setuptools.packages.find]
include = ["mclipboard*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
