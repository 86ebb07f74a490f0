[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "outrun"
version = "0.1.0"
description = "Server building blocks for an endless-runner mobile game: IDs, configuration, message encryption, storage, sessions, analytics and an HTTP front end."
requires-python = ">=3.10"
keywords = ["game-server", "endless-runner", "aes", "sessions", "analytics", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "cryptography",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
outrun = "outrun.server:main"

[tool.hatch.build.targets.wheel]
packages = ["outrun"]

[tool.pytest.ini_options]
addopts = "-ra"
