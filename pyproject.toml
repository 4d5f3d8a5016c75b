[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixdrills"
version = "0.1.0"
description = "Compact storage schemes for special matrices, sparse representations, bit tricks and recursion drills."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix",
    "triangular",
    "toeplitz",
    "symmetric",
    "sparse",
    "bitwise",
    "recursion",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[project.scripts]
matrixdrills-bits = "matrixdrills.bits:main"
matrixdrills-recursion = "matrixdrills.recursion:main"
matrixdrills-triangular = "matrixdrills.triangular:main"
matrixdrills-toeplitz = "matrixdrills.toeplitz:main"
matrixdrills-sparse = "matrixdrills.sparse:main"
matrixdrills-menu = "matrixdrills.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["matrixdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
