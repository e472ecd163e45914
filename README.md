# atos

A small text shell that runs on a grid of character cells, together with the
helpers it is built from.

- `atos.screen`: `TextScreen` is a grid of characters with a `Cursor`. It wraps
  at the right edge, scrolls up at the bottom, expands tabs to 4 columns, and
  has an insert mode that pushes the rest of the row right. `col_to_pix` and
  `row_to_pix` turn cell positions into pixel coordinates (8x16 cells with
  2 pixels of spacing).
- `atos.lineeditor`: `LineEditor` edits the command line after a `/ $ `
  prompt. `History` keeps the last 25 lines.
- `atos.commands`: `handle_command` runs the built-in commands `help`,
  `clear`, `cls`, `echo [text]`, `exit` and `version`. Commands are matched by
  prefix. It returns the name of the command that ran, or `"empty"` or
  `"unknown"`.
- `atos.shell`: `Shell` passes `KeyEvent`s to the line editor or straight to
  the screen, depending on its `ShellState`.
- `atos.iso9660` reads the primary volume descriptor of an ISO 9660 image,
  lists directories and extracts files.
- `atos.vesa_modes` holds the table of standard VESA/VBE video modes.
- `atos.cstr` has string and number conversions with 32-bit semantics.
- `atos.mathutil` has integer math and bit alignment helpers.
- `atos.graphics` draws lines, rectangles and triangles onto an in-memory
  `Surface`.

## Installation

```
pip install .
```

To run the test suite with pytest, install the `test` extra.

## Commands

Run command lines through the shell and print the resulting screen:

```
atoshell "echo hi" version
```

When no arguments are given, `atoshell` reads one command line per line from
standard input. The shell first shows its banner and prompt. It types each line
in and presses Enter, then prints the non-blank rows of the screen.

Look up a file inside an ISO 9660 image:

```
atos-iso9660 image.iso ATOS/32RTOSKR.BIN
```

With only an image, it prints the volume identifier and size. With a path, it
finds the file, matching names case-insensitively and ignoring `;1` version
suffixes, and writes its contents to `out.bin` in the current directory. The
contents are rounded up to whole 512-byte blocks.

List the standard VESA video modes and describe one of them, given in
hexadecimal:

```
atos-vesa-modes 118
```

## Library use

```python
from atos.screen import TextScreen
from atos.lineeditor import LineEditor

screen = TextScreen()
editor = LineEditor(screen)
editor.start_prompt()
for ch in "echo hi":
    editor.insert_char(ch)
editor.enter()                      # returns "echo"
print(screen.row_text(1).rstrip())  # hi
```

```python
from atos.cstr import itoa, atoi_hex
from atos.iso9660 import extract_file

itoa(-42, 10)      # "-42"
atoi_hex("1Fzz")   # 31

with open("image.iso", "rb") as image:
    data = extract_file(image, "inner/file.txt")
```

## What it does not do

- The shell keeps its screen as text only. It does not draw glyphs or a cursor
  to pixels. `CursorStyle` and the cursor colours are stored but never rendered.
- There is no keyboard driver. Input arrives as `KeyEvent` values, or as whole
  lines through `atoshell`.
- The shell cannot start programs or manage processes. `exit` only prints a
  message.
- The shell has no filesystem. The prompt path is always `/`. The ISO 9660
  reader is read-only.