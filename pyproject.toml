[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inboxdesk"
version = "0.1.0"
description = "An e-mail client that browses, previews and composes mail stored in a SQLite database."
requires-python = ">=3.10"
dependencies = []
keywords = ["email", "mail client", "sqlite", "event bus", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Email Clients (MUA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inboxdesk = "inboxdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["inboxdesk"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
