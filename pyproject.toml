[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boardtrace"
version = "0.1.0"
description = "A small ray tracer that renders a reversi board scene into a frame buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "bvh", "frame buffer", "reversi", "ppm"]
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

[project.scripts]
boardtrace = "boardtrace.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["boardtrace"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
