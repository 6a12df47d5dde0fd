[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transitcat"
version = "0.1.0"
description = "Public transport catalogue: stops, bus routes, route statistics, fastest-trip routing and SVG route maps driven by JSON requests"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "transport",
    "bus",
    "routing",
    "catalogue",
    "svg",
    "json",
    "shortest-path",
    "map",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transitcat = "transitcat.json_reader:main"

[tool.hatch.build.targets.wheel]
packages = ["transitcat"]

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
