[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitengine"
version = "0.1.0"
description = "Core of a small layered game engine: events, layers, input state, transforms, a fly camera and binary mesh loading"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game engine", "events", "layers", "input", "camera", "mesh", "transform"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["orbitengine"]

[tool.pytest.ini_options]
addopts = "-ra"
