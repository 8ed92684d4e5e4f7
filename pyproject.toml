[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytracer"
version = "0.1.0"
description = "A small ray tracing framework with shapes, ray-sphere intersection and PPM image output"
requires-python = ">=3.10"
dependencies = []
keywords = ["raytracing", "ppm", "geometry", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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

[project.scripts]
raytracer = "raytracer.renderer:main"

[tool.hatch.build.targets.wheel]
packages = ["raytracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
