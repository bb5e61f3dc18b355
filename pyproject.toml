[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "burovichok"
version = "0.1.0"
description = "Import, calculation and storage of well-test data: bottom-hole pressure, wellhead pressures, flow rates, inclinometry and report headers."
requires-python = ">=3.10"
keywords = [
    "well testing",
    "bottom-hole pressure",
    "hydrostatics",
    "inclinometry",
    "xlsx",
    "oil and gas",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "pyyaml",
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["burovichok"]

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
