[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctensor"
version = "0.1.0"
description = "Small dense tensors of up to four dimensions with gradient-node bookkeeping, an evaluation-mode switch and the Iris dataset"
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "gradient", "machine-learning", "iris", "dataset"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ctensor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
