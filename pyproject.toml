[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "b64asm"
version = "0.1.0"
description = "Two-pass assembler with macro expansion that emits base64-encoded 12-bit machine words"
requires-python = ">=3.10"
dependencies = []
keywords = ["assembler", "base64", "macro", "two-pass", "machine-code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
b64asm = "b64asm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["b64asm"]

[tool.pytest.ini_options]
addopts = "-ra"
