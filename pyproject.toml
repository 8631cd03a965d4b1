[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zooknn"
version = "0.1.0"
description = "k-nearest-neighbour classification of the zoo animal dataset with Euclidean, Hamming and Jaccard measures"
requires-python = ">=3.10"
dependencies = []
keywords = ["knn", "k-nearest-neighbors", "classification", "zoo", "jaccard", "hamming", "euclidean"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
zooknn = "zooknn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zooknn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
