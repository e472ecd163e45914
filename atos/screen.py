"""Character-cell text screen: a text buffer with a cursor, wrapping and scrolling.

The screen keeps what the shell shows as a grid of characters.  The cursor
wraps to the next row at the right edge.  The buffer scrolls up one row when
output runs past the bottom.  In insert mode, new characters push the rest
of the row to the right.
"""

import enum
from dataclasses import dataclass

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
CHAR_WIDTH = 8
CHAR_HEIGHT = 16
CHAR_SPACING = 2
AMOUNT_OF_COLS = SCREEN_WIDTH // (CHAR_WIDTH + CHAR_SPACING)
AMOUNT_OF_ROWS = SCREEN_HEIGHT // (CHAR_HEIGHT + CHAR_SPACING)
CUR_LINE_MAX_LENGTH = AMOUNT_OF_ROWS * AMOUNT_OF_COLS
CMD_LINE_HISTORY = 25
PATH_END_CHAR = " $ "
LEND = "\r\n"

TAB_WIDTH = 4
BLANK = " "
BLINK_INTERVAL = 500
SCROLL_PROCESS_INTERVAL = 16
GREEN = 0x00FF00
BLACK = 0x000000

_U32_MASK = 0xFFFFFFFF


def col_to_pix(col):
    """Pixel x coordinate of the left edge of text column ``col``."""
    return col * (CHAR_WIDTH + CHAR_SPACING)


def row_to_pix(row):
    """Pixel y coordinate of the top edge of text row ``row``."""
    return row * (CHAR_HEIGHT + CHAR_SPACING)


class CursorStyle(enum.IntEnum):
    """How the cursor is drawn."""

    BLOCK = 0
    UNDERLINE = 1
    BAR = 2


@dataclass
class Cursor:
    """Position and appearance of the text cursor."""

    column: int = 0
    row: int = 0
    fg_colour: int = GREEN
    bg_colour: int = BLACK
    style: CursorStyle = CursorStyle.BLOCK
    blink: bool = True
    visible: bool = True
    insert_mode: bool = True


class TextScreen:
    """A grid of characters with a cursor, as shown by the shell."""

    def __init__(self, columns=AMOUNT_OF_COLS, rows=AMOUNT_OF_ROWS):
        if columns <= 0 or rows <= 0:
            raise ValueError("screen dimensions must be positive")
        self.columns = columns
        self.rows = rows
        self.cursor = Cursor()
        self._cells = [[BLANK] * columns for _ in range(rows)]
        self.pending_scrolls = 0
        self.cursor_shown = True
        self._last_scroll_tick = 0
        self._last_toggle_tick = 0

    # -- cell access -------------------------------------------------------

    def _check(self, col, row):
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise IndexError(f"cell ({col}, {row}) outside screen")

    def __getitem__(self, position):
        col, row = position
        self._check(col, row)
        return self._cells[row][col]

    def __setitem__(self, position, char):
        col, row = position
        self._check(col, row)
        if len(char) != 1:
            raise ValueError("a cell holds exactly one character")
        self._cells[row][col] = char

    def row_text(self, row):
        """The whole text of ``row``, blanks included."""
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} outside screen")
        return "".join(self._cells[row])

    # -- cursor movement ---------------------------------------------------

    def scroll_up(self):
        """Move every row up by one and blank the bottom row."""
        del self._cells[0]
        self._cells.append([BLANK] * self.columns)
        self.pending_scrolls += 1

    def column_inc(self):
        """Advance the cursor one column, wrapping and scrolling as needed."""
        cursor = self.cursor
        cursor.column += 1
        if cursor.column >= self.columns:
            cursor.column = 0
            cursor.row += 1
            if cursor.row >= self.rows:
                self.scroll_up()
                cursor.row = self.rows - 1

    def column_dec(self):
        """Step the cursor back one column, onto the previous row's end at column 0."""
        cursor = self.cursor
        if cursor.column > 0:
            cursor.column -= 1
        elif cursor.row > 0:
            cursor.row -= 1
            cursor.column = self.columns - 1

    def row_inc(self):
        """Move the cursor down one row, scrolling at the bottom."""
        cursor = self.cursor
        cursor.row += 1
        if cursor.row >= self.rows:
            cursor.row = self.rows - 1
            self.scroll_up()

    def row_dec(self):
        """Move the cursor up one row unless it is at the top."""
        if self.cursor.row > 0:
            self.cursor.row -= 1

    def newline(self):
        """Move the cursor to the start of the next row."""
        self.cursor.column = 0
        self.row_inc()

    # -- row editing helpers -----------------------------------------------

    def _shift_right_from(self, col, row):
        if col >= self.columns:
            return
        cells = self._cells[row]
        cells[col + 1 :] = cells[col : self.columns - 1]

    def _shift_left_from(self, col, row):
        if col >= self.columns:
            return
        cells = self._cells[row]
        cells[col:] = cells[col + 1 :] + [BLANK]

    # -- output ------------------------------------------------------------

    def putc(self, char):
        """Write one character at the cursor; returns the count written (1)."""
        if len(char) != 1:
            raise ValueError("putc takes exactly one character")
        cursor = self.cursor
        if char == "\n":
            self.newline()
            return 1
        if char == "\r":
            cursor.column = 0
            return 1
        if char == "\t":
            for _ in range(TAB_WIDTH - cursor.column % TAB_WIDTH):
                self._write_at_cursor(BLANK)
            return 1
        self._write_at_cursor(char)
        return 1

    def _write_at_cursor(self, char):
        cursor = self.cursor
        if cursor.insert_mode:
            self._shift_right_from(cursor.column, cursor.row)
        self._cells[cursor.row][cursor.column] = char
        self.column_inc()

    def puts(self, text):
        """Write every character of ``text``; returns how many were written."""
        return sum(self.putc(ch) for ch in text)

    def backspace(self):
        """Delete the character before the cursor and pull the row left."""
        cursor = self.cursor
        if cursor.row == 0 and cursor.column == 0:
            return
        if cursor.column == 0:
            self.row_dec()
            cursor.column = self.columns - 1
        else:
            cursor.column -= 1
        self._shift_left_from(cursor.column, cursor.row)

    def delete_char(self):
        """Delete the character under the cursor and pull the row left."""
        self._shift_left_from(self.cursor.column, self.cursor.row)

    # -- arrow keys --------------------------------------------------------

    def arrow_left(self):
        cursor = self.cursor
        if cursor.column > 0:
            self.column_dec()
        elif cursor.row > 0:
            cursor.row -= 1
            cursor.column = self.columns - 1

    def arrow_right(self):
        cursor = self.cursor
        if cursor.column < self.columns - 1:
            self.column_inc()
        elif cursor.row < self.rows - 1:
            cursor.row += 1
            cursor.column = 0

    def arrow_up(self):
        cursor = self.cursor
        if cursor.row > 0:
            cursor.row -= 1
            cursor.column = min(cursor.column, self.columns - 1)

    def arrow_down(self):
        cursor = self.cursor
        if cursor.row < self.rows - 1:
            cursor.row += 1
            cursor.column = min(cursor.column, self.columns - 1)

    # -- cursor appearance -------------------------------------------------

    def toggle_insert_mode(self):
        """Switch between inserting and overwriting; returns the new mode."""
        self.cursor.insert_mode = not self.cursor.insert_mode
        return self.cursor.insert_mode

    def set_cursor_visible(self, visible):
        self.cursor.visible = bool(visible)

    def set_cursor_blink(self, blink):
        self.cursor.blink = bool(blink)
        if not blink:
            self.cursor_shown = True

    def _process_pending_scrolls(self, tick):
        if self.pending_scrolls == 0:
            return
        if ((tick - self._last_scroll_tick) & _U32_MASK) < SCROLL_PROCESS_INTERVAL:
            return
        self._last_scroll_tick = tick
        self.pending_scrolls = 0

    def blink(self, tick):
        """Advance the blink state to timer ``tick``; True when the cursor shows.

        Scrolls that piled up are settled at most once per
        ``SCROLL_PROCESS_INTERVAL`` ticks.
        """
        self._process_pending_scrolls(tick)
        if not self.cursor.blink:
            self.cursor_shown = True
        elif ((tick - self._last_toggle_tick) & _U32_MASK) >= BLINK_INTERVAL:
            self._last_toggle_tick = tick
            self.cursor_shown = not self.cursor_shown
        return self.cursor_shown and self.cursor.visible

    def clear(self):
        """Blank every cell; the cursor stays where it is."""
        self._cells = [[BLANK] * self.columns for _ in range(self.rows)]