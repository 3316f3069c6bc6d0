[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teapotscene"
version = "0.1.0"
description = "Transform maths, a yaw/pitch camera, OBJ mesh loading and scene data for a lit teapot scene"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["graphics", "3d", "camera", "obj", "matrices", "lighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
packages = ["teapotscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
