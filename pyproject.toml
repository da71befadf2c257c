[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "adapter",
    "builder",
    "factory",
    "proxy",
    "singleton",
    "observer",
    "producer-consumer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-adapter = "patternkit.adapter:main"
patternkit-builder = "patternkit.builder:main"
patternkit-factory = "patternkit.factory:main"
patternkit-proxy = "patternkit.proxy:main"
patternkit-singleton = "patternkit.singleton:main"
patternkit-observer = "patternkit.observer:main"
patternkit-weather = "patternkit.weather:main"
patternkit-producer-consumer = "patternkit.producer_consumer:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
