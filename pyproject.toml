[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xuan"
version = "0.1.0"
description = "Load the Unihan database and look up CJK ideographs by character, code point or U+ notation"
requires-python = ">=3.10"
dependencies = []
keywords = ["unihan", "unicode", "cjk", "han", "chinese", "characters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xuan = "xuan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xuan"]

[tool.pytest.ini_options]
addopts = "-ra"
