[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloodbank"
version = "0.1.0"
description = "Interactive terminal tool for registering blood donors and booking donation appointments"
requires-python = ">=3.10"
dependencies = []
keywords = ["blood donation", "donor registry", "appointments", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bloodbank = "bloodbank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bloodbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
