[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mimetic"
version = "0.9.7"
description = "RFC 822 header values: mailboxes, addresses, groups, dates, message ids, fields and headers, with string and file helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["email", "rfc822", "mailbox", "header", "address", "date"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mimetic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
