"""The interactive shell: keyboard events drive a line editor on a text screen."""

import enum
import sys
from dataclasses import dataclass

from atos.lineeditor import LineEditor
from atos.screen import TextScreen

BANNER = "atOShell v0.1\r\nType 'help' for a list of commands.\r\n"


class Key(enum.Enum):
    """Keys the shell handles specially; everything else is a character key."""

    ENTER = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    ARROW_UP = enum.auto()
    ARROW_DOWN = enum.auto()
    ARROW_LEFT = enum.auto()
    ARROW_RIGHT = enum.auto()
    INSERT = enum.auto()
    CHARACTER = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key going down or up, with the character it types, if any."""

    key: Key
    char: str = ""
    pressed: bool = True
    ctrl: bool = False

    @property
    def is_ctrl_c(self):
        return self.key is Key.CHARACTER and self.ctrl and self.char in ("c", "C")


class ShellState(enum.Enum):
    """What keyboard input currently controls."""

    CMD_INTERFACE = enum.auto()
    EDIT_LINE = enum.auto()


class Shell:
    """A shell instance: screen, line editor and input mode."""

    def __init__(self, screen=None):
        self.screen = screen if screen is not None else TextScreen()
        self.editor = LineEditor(self.screen)
        self.state = ShellState.EDIT_LINE
        self.path = self.editor.path

    def start(self):
        """Clear the screen, show the banner and the first prompt."""
        self.screen.clear()
        self.screen.cursor.row = 0
        self.screen.cursor.column = 0
        self.screen.puts(BANNER)
        self.editor.start_prompt()

    def switch_mode(self, state):
        self.state = ShellState(state)

    def handle_key(self, event):
        """Act on one keyboard event; key releases are ignored."""
        if not event.pressed:
            return
        if self.state is ShellState.CMD_INTERFACE:
            self._handle_cmd_interface(event)
        else:
            self._handle_edit_line(event)

    def process_events(self, events):
        """Handle each event in turn; returns how many were handled."""
        count = 0
        for event in events:
            self.handle_key(event)
            count += 1
        return count

    def _new_prompt_line(self):
        self.screen.cursor.column = 0
        self.screen.row_inc()
        self.editor.start_prompt()

    def _handle_cmd_interface(self, event):
        screen = self.screen
        actions = {
            Key.BACKSPACE: screen.backspace,
            Key.DELETE: screen.delete_char,
            Key.ARROW_UP: screen.arrow_up,
            Key.ARROW_DOWN: screen.arrow_down,
            Key.ARROW_LEFT: screen.arrow_left,
            Key.ARROW_RIGHT: screen.arrow_right,
            Key.INSERT: screen.toggle_insert_mode,
        }
        if event.key is Key.ENTER:
            self._new_prompt_line()
        elif event.key in actions:
            actions[event.key]()
        elif event.is_ctrl_c:
            screen.puts("^C")
            self._new_prompt_line()
        elif event.char:
            screen.putc(event.char)

    def _handle_edit_line(self, event):
        editor = self.editor
        actions = {
            Key.ENTER: editor.enter,
            Key.BACKSPACE: editor.backspace,
            Key.DELETE: editor.delete,
            Key.ARROW_UP: editor.history_up,
            Key.ARROW_DOWN: editor.history_down,
            Key.ARROW_LEFT: editor.move_left,
            Key.ARROW_RIGHT: editor.move_right,
        }
        if event.key in actions:
            actions[event.key]()
        elif event.is_ctrl_c:
            editor.interrupt()
            self.state = ShellState.EDIT_LINE
        elif event.key is Key.CHARACTER and event.char:
            editor.insert_char(event.char)


def _render(screen):
    lines = [screen.row_text(row).rstrip() for row in range(screen.rows)]
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def main(argv=None):
    """Run each command line given (or read from standard input) and print the screen."""
    args = sys.argv[1:] if argv is None else list(argv)
    commands = args if args else (line.rstrip("\r\n") for line in sys.stdin)
    shell = Shell()
    shell.start()
    for command in commands:
        events = [KeyEvent(Key.CHARACTER, ch) for ch in command]
        events.append(KeyEvent(Key.ENTER))
        shell.process_events(events)
    print(_render(shell.screen))
    return 0


if __name__ == "__main__":
    sys.exit(main())