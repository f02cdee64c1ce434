[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sencha"
version = "0.1.0"
description = "A small game-engine core: services, systems, batches, logging, vectors and a backend-agnostic render loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "ecs", "services", "rendering", "vector math", "logging"]
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
test = ["pytest"]

[project.scripts]
sencha-demo = "sencha.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sencha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
