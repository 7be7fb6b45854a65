[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nocturne"
version = "0.1.0"
description = "A small desktop music player that downloads the tracks of a plain-text list and plays them from a scrollable song list"
requires-python = ">=3.10"
keywords = ["music", "player", "playlist", "audio", "wav", "pygame", "yt-dlp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nocturne = "nocturne.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nocturne"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
