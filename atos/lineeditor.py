"""Editing of the shell's command line on a text screen, with command history.

The line being typed lives on the prompt row, after the prompt.  Each edit
redraws that region of the row and puts the cursor back at the edit
position.
"""

from collections import deque

from atos.commands import handle_command
from atos.screen import (
    BLANK,
    CMD_LINE_HISTORY,
    CUR_LINE_MAX_LENGTH,
    PATH_END_CHAR,
    TextScreen,
)

ROOT_PATH = "/"
PROMPT = ROOT_PATH + PATH_END_CHAR


class History:
    """The most recent command lines, oldest first, up to ``limit`` of them."""

    def __init__(self, limit=CMD_LINE_HISTORY):
        if limit <= 0:
            raise ValueError("history limit must be positive")
        self._entries = deque(maxlen=limit)

    @property
    def limit(self):
        return self._entries.maxlen

    def push(self, line):
        """Append ``line``; the oldest entry is dropped once the history is full."""
        self._entries.append(line)

    def clear(self):
        """Forget every entry."""
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __iter__(self):
        return iter(self._entries)


class LineEditor:
    """The command line under edit, drawn after the prompt on a text screen."""

    def __init__(self, screen=None, history=None, command_handler=handle_command):
        self.screen = screen if screen is not None else TextScreen()
        self.history = history if history is not None else History()
        self.command_handler = command_handler
        self.path = ROOT_PATH
        self.edit_pos = 0
        self.prompt_length = 0
        self.prompt_row = 0
        self.history_index = 0
        self._line = ""

    @property
    def line(self):
        """The text typed so far."""
        return self._line

    # -- drawing -------------------------------------------------------------

    def _sync_cursor(self):
        cursor = self.screen.cursor
        cursor.row = self.prompt_row
        cursor.column = min(self.prompt_length + self.edit_pos, self.screen.columns - 1)

    def _redraw(self):
        screen = self.screen
        row = self.prompt_row
        width = max(screen.columns - self.prompt_length, 0)
        visible = self._line[:width].ljust(width, BLANK)
        for offset, ch in enumerate(visible):
            screen[self.prompt_length + offset, row] = ch
        self._sync_cursor()

    # -- prompt --------------------------------------------------------------

    def start_prompt(self):
        """Print the path and prompt and start an empty line after them."""
        self.screen.puts(ROOT_PATH)
        self.screen.puts(PATH_END_CHAR)
        self.prompt_length = self.screen.cursor.column
        self.prompt_row = self.screen.cursor.row
        self.edit_pos = 0
        self._line = ""
        self._sync_cursor()

    # -- editing -------------------------------------------------------------

    def insert_char(self, char):
        """Insert ``char`` at the edit position; False when the line is full."""
        if len(char) != 1:
            raise ValueError("insert_char takes exactly one character")
        if len(self._line) >= CUR_LINE_MAX_LENGTH - 1:
            return False
        pos = self.edit_pos
        self._line = self._line[:pos] + char + self._line[pos:]
        self.edit_pos += 1
        self._redraw()
        return True

    def backspace(self):
        """Delete the character before the edit position."""
        if self.edit_pos == 0:
            self._sync_cursor()
            return
        self.edit_pos -= 1
        pos = self.edit_pos
        self._line = self._line[:pos] + self._line[pos + 1 :]
        self._redraw()

    def delete(self):
        """Delete the character at the edit position."""
        pos = self.edit_pos
        if pos >= len(self._line):
            self._sync_cursor()
            return
        self._line = self._line[:pos] + self._line[pos + 1 :]
        self._redraw()

    def move_left(self):
        if self.edit_pos > 0:
            self.edit_pos -= 1
        self._sync_cursor()

    def move_right(self):
        if self.edit_pos < len(self._line):
            self.edit_pos += 1
        self._sync_cursor()

    # -- history -------------------------------------------------------------

    def _show(self, text):
        self._line = text[:CUR_LINE_MAX_LENGTH]
        self.edit_pos = len(self._line)
        self._redraw()

    def history_up(self):
        """Show the next older history entry."""
        count = len(self.history)
        if count == 0:
            return
        self.history_index = min(self.history_index + 1, count)
        self._show(self.history[count - self.history_index])

    def history_down(self):
        """Show the next newer history entry, or a blank line past the newest."""
        count = len(self.history)
        if count == 0 or self.history_index == 0:
            return
        self.history_index -= 1
        if self.history_index == 0:
            self._show("")
        else:
            self._show(self.history[count - self.history_index])

    # -- line actions ----------------------------------------------------------

    def enter(self):
        """Run the line up to the edit position, record it and show a new prompt.

        Returns what the command handler returned.
        """
        line = self._line[: self.edit_pos]
        self._line = line
        result = self.command_handler(self, line) if self.command_handler else None
        self.history.push(line)
        self._line = ""
        self.edit_pos = 0
        self.screen.cursor.column = 0
        self.start_prompt()
        self.history_index = 0
        return result

    def interrupt(self):
        """Show ``^C``, drop the line and start a new prompt."""
        self.screen.puts("^C\n")
        self._line = ""
        self.edit_pos = 0
        self.history_index = 0
        self.start_prompt()

    def clear_screen(self):
        """Blank the screen and start a new prompt at the top."""
        self.screen.clear()
        self._line = ""
        self.edit_pos = 0
        self.history_index = 0
        self.screen.cursor.row = 0
        self.screen.cursor.column = 0
        self.start_prompt()