"""The table of standard VESA/VBE video modes and a command to list it."""

import sys
from dataclasses import dataclass

from atos.cstr import atoi_hex

OEM_MODE_LIMIT = 0xFF
U16_MASK = 0xFFFF


@dataclass(frozen=True)
class VideoMode:
    """A VESA mode number and what it gives."""

    number: int
    description: str

    @property
    def label(self):
        return f"{self.number:X}h"

    def __str__(self):
        return f"{self.label} - {self.description}"


_MODES = (
    VideoMode(0x100, "640x400x256"),
    VideoMode(0x101, "640x480x256"),
    VideoMode(0x102, "800x600x16"),
    VideoMode(0x103, "800x600x256"),
    VideoMode(0x104, "1024x768x16"),
    VideoMode(0x105, "1024x768x256"),
    VideoMode(0x106, "1280x1024x16"),
    VideoMode(0x107, "1280x1024x256"),
    VideoMode(0x108, "80x60 text"),
    VideoMode(0x109, "132x25 text"),
    VideoMode(0x10A, "132x43 text"),
    VideoMode(0x10B, "132x50 text"),
    VideoMode(0x10C, "132x60 text"),
    VideoMode(0x10D, "320x200x32K"),
    VideoMode(0x10E, "320x200x64K"),
    VideoMode(0x10F, "320x200x16M"),
    VideoMode(0x110, "640x480x32K"),
    VideoMode(0x111, "640x480x64K"),
    VideoMode(0x112, "640x480x16M"),
    VideoMode(0x113, "800x600x32K"),
    VideoMode(0x114, "800x600x64K"),
    VideoMode(0x115, "800x600x16M"),
    VideoMode(0x116, "1024x768x32K"),
    VideoMode(0x117, "1024x768x64K"),
    VideoMode(0x118, "1024x768x16M"),
    VideoMode(0x119, "1280x1024x32K (1:5:5:5)"),
    VideoMode(0x11A, "1280x1024x64K (5:6:5)"),
    VideoMode(0x11B, "1280x1024x16M"),
    VideoMode(0x120, "1600x1200x256"),
    VideoMode(0x121, "1600x1200x32K"),
    VideoMode(0x122, "1600x1200x64K"),
    VideoMode(0x81FF, "special full-memory access mode"),
)

_BY_NUMBER = {mode.number: mode.description for mode in _MODES}


def mode_table():
    """All standard modes in ascending order of mode number."""
    return _MODES


def parse_mode(text):
    """Read a hexadecimal mode number as a 16-bit value.

    Leading blanks, a sign and a ``0x`` prefix are accepted; parsing stops
    at the first non-hex character and gives 0 when there is none.
    """
    rest = text.lstrip()
    negative = rest[:1] == "-"
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    if rest[:2].lower() == "0x" and atoi_hex(rest[2:3]) or rest[2:3] == "0":
        rest = rest[2:]
    value = atoi_hex(rest) & U16_MASK
    return (-value) & U16_MASK if negative else value


def describe_mode(number):
    """Describe a mode number; ValueError for numbers outside the table."""
    if 0 <= number <= OEM_MODE_LIMIT:
        return "OEM video mode"
    try:
        return _BY_NUMBER[number]
    except KeyError:
        raise ValueError(f"unknown VESA mode: 0x{number:04X}") from None


def main(argv=None):
    """List the known modes and describe the one given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    program = "dump_vesa_modes"
    if not args:
        print(f"Usage: {program} <mode>")
        return 1

    print("Arguments:")
    for index, arg in enumerate([program, *args]):
        print(f"  argv[{index}]: {arg}")

    print("Available video modes:")
    for mode in mode_table():
        print(mode)

    target = parse_mode(args[0])
    try:
        description = describe_mode(target)
    except ValueError:
        description = "unknown mode"
    print(f"Selected mode 0x{target:04X}: {description}")
    return 0


if __name__ == "__main__":
    sys.exit(main())