[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mimecte"
version = "0.1.0"
description = "The MIME Content-Transfer-Encoding header field value, with case-insensitive mechanism names"
requires-python = ">=3.10"
dependencies = []
keywords = ["mime", "email", "content-transfer-encoding", "rfc2045", "header"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mimecte"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
