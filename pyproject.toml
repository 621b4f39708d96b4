[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kwmonitor"
version = "0.1.0"
description = "Keyword monitoring helpers for multi-stream video walls: keyword storage, highlighting, layout settings and warning records"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtsp", "monitoring", "keywords", "highlighting", "warning-records", "csv"]
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
    "Topic :: Multimedia :: Video :: Display",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kwmonitor"]

[tool.pytest.ini_options]
addopts = "-ra"
