[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gcanalyzer"
version = "0.1.0"
description = "Gas chromatography tools for refrigerant samples: detector series reading, smoothing, mixture comparison, linear-programming mixture estimates and plotting."
requires-python = ">=3.10"
keywords = [
    "gas chromatography",
    "refrigerants",
    "mixtures",
    "signal processing",
    "linear programming",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "scipy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gc-analyzer = "gcanalyzer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gcanalyzer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
