[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neuronet"
version = "0.1.0"
description = "A small feed-forward neural network built from neurons and layers"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "perceptron", "feed-forward", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
neuronet-demo = "neuronet.main:main"

[tool.hatch.build.targets.wheel]
packages = ["neuronet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
