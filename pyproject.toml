[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitsvc"
version = "0.1.0"
description = "Manage git worktrees with symlinks"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "worktree", "symlink", "monorepo", "sparse-checkout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
git-svc = "gitsvc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitsvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
