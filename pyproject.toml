[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "numerik"
version = "0.1.0"
description = "Introductory numerical methods: LR decomposition, finite-difference Jacobians, Newton iteration, Euler's method and least-squares fitting"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "numerics",
    "linear algebra",
    "lu decomposition",
    "jacobian",
    "finite differences",
    "newton method",
    "secant method",
    "euler method",
    "least squares",
]
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numerik-matrix = "numerik.matrix_io:main"
numerik-jacobian = "numerik.jacobian:main"
numerik-lu = "numerik.lu:main"
numerik-secant = "numerik.secant:main"
numerik-euler = "numerik.euler:main"
numerik-regression = "numerik.regression:main"

[tool.setuptools.packages.find]
include = ["numerik*"]

[tool.pytest.ini_options]
addopts = "-ra"
