[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnahelix"
version = "0.1.0"
description = "Animated DNA double helix built from sine and cosine strands of base-paired spheres"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["dna", "helix", "animation", "visualization", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dnahelix = "dnahelix.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dnahelix"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
