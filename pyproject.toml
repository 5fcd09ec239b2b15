[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "earthsphere"
version = "0.1.0"
description = "A cellular automaton of dirt, grass and water painted on a sphere you can orbit and click"
requires-python = ">=3.10"
keywords = ["cellular-automaton", "simulation", "sphere", "pygame", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
earthsphere = "earthsphere.app:main"

[tool.hatch.build.targets.wheel]
packages = ["earthsphere"]

[tool.pytest.ini_options]
addopts = "-ra"
