"""Character-grid text shell with line editing, plus string, math, drawing, ISO 9660 and VESA mode helpers."""

__version__ = "0.1.0"

__all__ = [
    "cstr",
    "mathutil",
    "graphics",
    "iso9660",
    "vesa_modes",
    "screen",
    "lineeditor",
    "commands",
    "shell",
]