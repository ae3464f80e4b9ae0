[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirsync_cloud"
version = "0.1.0"
description = "TCP client and server: the client sends a directory listing and the server stores it as a text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["sockets", "tcp", "directory", "listing", "client", "server", "ipv6"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: File Sharing",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dirsync-client = "dirsync_cloud.client:main"
dirsync-server = "dirsync_cloud.server:main"

[tool.hatch.build.targets.wheel]
packages = ["dirsync_cloud"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
