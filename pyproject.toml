[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerbox"
version = "0.1.0"
description = "Small tools: CPF/CNPJ validation, an AVL tree, approximate distinct counting, deterministic weighted choice, a floating-point explorer, dice odds, copy-on-write holders and closures with explicit captures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cpf",
    "cnpj",
    "avl-tree",
    "count-distinct",
    "weighted-choice",
    "ieee-754",
    "floating-point",
    "dice",
    "copy-on-write",
    "closures",
]
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
    "Environment :: Console",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brid = "tinkerbox.brid.cli:main"
approximate-count-distinct = "tinkerbox.approximate:main"
deterministic-chooser = "tinkerbox.chooser:main"
dice-probabilities = "tinkerbox.dice:main"
floatx = "tinkerbox.floatx.explorer:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerbox"]

[tool.hatch.build.targets.sdist]
include = ["tinkerbox", "tests", "README.md", "pyproject.toml"]

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
