[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizkit"
version = "0.1.0"
description = "Small teaching components: a calculator with memory, ASCII string utilities, a simple stack and debugging helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "calculator", "strings", "stack", "debugging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizkit-demo = "quizkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["quizkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
