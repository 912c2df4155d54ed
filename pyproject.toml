[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storekit"
version = "4.0.0"
description = "Request builders for a game store inventory API and a model of a themeable UI builder."
requires-python = ">=3.10"
keywords = ["inventory", "store", "virtual currency", "coupons", "game", "ui theme"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["storekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
