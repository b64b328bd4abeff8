[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todo-service"
version = "0.1.0"
description = "A small HTTP service for managing to-do items stored in a JSON file"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["todo", "http", "flask", "json", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
todo-service = "todo_service.views:main"

[tool.hatch.build.targets.wheel]
packages = ["todo_service"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
