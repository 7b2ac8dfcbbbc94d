[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rawrxd"
version = "0.1.0"
description = "A small software rasterizer that draws triangle meshes to a terminal or a window"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["rasterizer", "3d", "rendering", "terminal", "software-renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rawrxd"]

[tool.pytest.ini_options]
addopts = "-ra"
