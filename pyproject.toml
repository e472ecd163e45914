[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atos"
version = "0.1.0"
description = "A character-grid text shell with line editing and command history, plus string, math, drawing, ISO 9660 and VESA mode helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "line-editor", "text-screen", "iso9660", "vesa", "framebuffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atoshell = "atos.shell:main"
atos-iso9660 = "atos.iso9660:main"
atos-vesa-modes = "atos.vesa_modes:main"

[tool.hatch.build.targets.wheel]
packages = ["atos"]

[tool.pytest.ini_options]
addopts = "-ra"
