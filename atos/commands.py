"""The shell's built-in commands."""

from atos.cstr import starts_equal
from atos.screen import LEND

VERSION_TEXT = "atOS Shell version 1.0.0"
HELP_LINES = (
    "Available commands:",
    "help - Show this help message",
    "clear - Clear the screen",
    "cls - Clear the screen",
    "echo [text] - Echo the provided text",
    "exit - Exit the shell",
    "version - Show shell version",
)
ECHO_PREFIX = "echo "


def _matches(line, command):
    return starts_equal(line, command, len(command))


def handle_command(editor, line):
    """Run ``line`` on the editor's screen and name the command that ran.

    Commands are recognised by prefix.  The result is one of ``"help"``,
    ``"clear"``, ``"version"``, ``"exit"``, ``"echo"``, ``"empty"`` and
    ``"unknown"``.
    """
    screen = editor.screen
    screen.set_cursor_visible(False)
    try:
        if _matches(line, "help"):
            screen.newline()
            for text in HELP_LINES:
                screen.puts(text + LEND)
            return "help"
        if _matches(line, "clear") or _matches(line, "cls"):
            editor.clear_screen()
            return "clear"
        if _matches(line, "version"):
            screen.newline()
            screen.puts(VERSION_TEXT + LEND)
            return "version"
        if _matches(line, "exit"):
            screen.newline()
            screen.puts("Exiting shell..." + LEND)
            return "exit"
        if _matches(line, ECHO_PREFIX):
            screen.newline()
            rest = line[len(ECHO_PREFIX) :]
            if rest:
                screen.puts(rest)
            screen.newline()
            return "echo"
        if not line:
            screen.newline()
            return "empty"
        screen.newline()
        screen.puts("Unknown command: ")
        screen.puts(line)
        screen.newline()
        return "unknown"
    finally:
        screen.set_cursor_visible(True)