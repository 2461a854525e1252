[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "traefikctl"
version = "0.2.0"
description = "Manage Traefik reverse proxy dynamic configuration files"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["traefik", "reverse-proxy", "configuration", "yaml", "routing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["traefikctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
