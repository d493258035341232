[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yoinkdesk"
version = "0.1.0"
description = "A small desktop notebook that appends topic-tagged captures to a Markdown file."
requires-python = ">=3.10"
dependencies = []
keywords = ["notes", "capture", "markdown", "journal", "desktop", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yoinkdesk = "yoinkdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yoinkdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
