[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auracore"
version = "0.0.1"
description = "Core building blocks for a small robotics application framework: nodes, parameters and in-process publish/subscribe."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "framework", "pubsub", "parameters", "nodes"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aura-talker = "auracore.talker:main"
aura-listener = "auracore.listener:main"

[tool.hatch.build.targets.wheel]
packages = ["auracore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
