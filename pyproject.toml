[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidectl"
version = "0.0.1"
description = "Render Presentation resources into Markdown slide decks and build the ConfigMap, Deployment and Service that serve them."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "controller", "reconciler", "presentation", "slides", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slidectl-render = "slidectl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slidectl"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
