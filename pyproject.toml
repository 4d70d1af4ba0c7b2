[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studyplanner"
version = "0.1.0"
description = "A terminal study planner that tracks tasks in progress, completed and expired, with weekly reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["planner", "study", "tasks", "deadlines", "terminal", "weekly report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studyplanner = "studyplanner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studyplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
