[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizwhiz"
version = "0.1.0"
description = "A terminal quiz system: make answer-key quizzes, let students take them once, and review their scores."
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "education", "terminal", "grading", "students"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizwhiz = "quizwhiz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizwhiz"]

[tool.pytest.ini_options]
addopts = "-ra"
