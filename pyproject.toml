[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aphcore"
version = "0.1.0"
description = "Engine core building blocks: a thread-safe deque, thread naming, input keys, window-system key translation, GPU resource descriptions and Vulkan setup-structure builders."
requires-python = ">=3.10"
dependencies = []
keywords = ["thread-safe queue", "work stealing", "input", "key codes", "glfw", "sdl2", "vulkan", "engine"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aphcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
