[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "introcs"
version = "0.1.0"
description = "Small classic computing programs: Gaussian functions, recursion, fractals, random simulations and percolation."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = [
    "gaussian",
    "cdf",
    "recursion",
    "towers of hanoi",
    "fractal",
    "sierpinski",
    "iterated function system",
    "brownian bridge",
    "percolation",
    "monte carlo",
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
introcs-gaussian = "introcs.gaussian:main"
introcs-gaussian-table = "introcs.gaussian:table_main"
introcs-greet = "introcs.greeting:main"
introcs-coupon = "introcs.coupon:main"
introcs-tune = "introcs.tune:main"
introcs-euclid = "introcs.recursion:euclid_main"
introcs-hanoi = "introcs.recursion:hanoi_main"
introcs-beckett = "introcs.recursion:beckett_main"
introcs-sierpinski = "introcs.fractals:sierpinski_main"
introcs-ifs = "introcs.fractals:ifs_main"
introcs-htree = "introcs.fractals:htree_main"
introcs-brownian = "introcs.fractals:brownian_main"
introcs-bernoulli = "introcs.bernoulli:main"
introcs-percolation-vertical = "introcs.percolation:vertical_main"
introcs-percolation = "introcs.percolation:main"
introcs-estimate-vertical = "introcs.percolation:estimate_vertical_main"
introcs-estimate = "introcs.percolation:estimate_main"
introcs-percolation-io = "introcs.percolation_view:io_main"
introcs-visualize-vertical = "introcs.percolation_view:visualize_vertical_main"
introcs-visualize = "introcs.percolation_view:visualize_main"

[tool.hatch.build.targets.wheel]
packages = ["introcs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
