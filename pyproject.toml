[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "algoshelf"
version = "0.1.0"
description = "A shelf of classic algorithms: sorting, searching, strings, bit tricks and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "graphs", "sorting", "searching", "dynamic-programming"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["algoshelf"]

[tool.pytest.ini_options]
addopts = "-ra"
