[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staticweb"
version = "0.1.0"
description = "A small threaded HTTP/1.x server that serves static files from a directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "web server", "static files", "threads"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
staticweb = "staticweb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["staticweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
