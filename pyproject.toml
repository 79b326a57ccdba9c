[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsekit"
version = "0.1.0"
description = "Sparse matrices in COO and CSR formats with a conjugate gradient solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "matrix", "csr", "coo", "conjugate-gradient", "linear-algebra"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparsekit-demo = "sparsekit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sparsekit"]

[tool.pytest.ini_options]
addopts = "-ra"
