[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portopt"
version = "0.1.0"
description = "Portfolio statistics, random weight sampling and efficient-frontier estimation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["portfolio", "efficient frontier", "covariance", "simplex grid", "finance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
portopt = "portopt.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["portopt"]

[tool.pytest.ini_options]
addopts = "-ra"
