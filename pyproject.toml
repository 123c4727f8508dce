[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isowire"
version = "0.1.0"
description = "Parse height maps and project them into isometric screen coordinates"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "isometric", "height map", "fdf", "projection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["isowire"]

[tool.pytest.ini_options]
addopts = "-ra"
