[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eppkit"
version = "0.1.0"
description = "Build EPP (Extensible Provisioning Protocol) command documents and parse EPP responses for hosts, the message queue and registry extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["epp", "registry", "registrar", "host", "rfc5730", "rfc5733", "xml"]
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
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eppkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
