[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teil"
version = "0.1.0"
description = "Inference for small pre-trained machine-learning models and zero-dimensional homology analysis"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "machine-learning",
    "inference",
    "svm",
    "neural-network",
    "naive-bayes",
    "decision-tree",
    "pca",
    "simca",
    "homology",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[project.scripts]
teil-homology-demo = "teil.homology_demo:main"
teil-iris-svc = "teil.iris_svc:main"

[tool.hatch.build.targets.wheel]
packages = ["teil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
