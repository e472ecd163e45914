from atos.lineeditor import PROMPT
from atos.shell import BANNER, Key, KeyEvent, Shell, ShellState, main


def started():
    shell = Shell()
    shell.start()
    return shell


def type_text(shell, text):
    return shell.process_events(KeyEvent(Key.CHARACTER, ch) for ch in text)


def test_start_shows_banner_and_prompt():
    shell = started()
    assert shell.screen.row_text(0).startswith("atOShell v0.1")
    assert shell.screen.row_text(1).startswith("Type 'help' for a list of commands.")
    assert shell.screen.row_text(2).startswith(PROMPT)
    assert shell.state is ShellState.EDIT_LINE


def test_banner_rows_match_constant():
    shell = started()
    expected = [part for part in BANNER.split("\r\n") if part]
    assert [shell.screen.row_text(i).rstrip() for i in range(2)] == expected


def test_typing_and_enter_runs_command():
    shell = started()
    assert type_text(shell, "echo hi") == len("echo hi")
    shell.handle_key(KeyEvent(Key.ENTER))
    assert shell.screen.row_text(3).rstrip() == "hi"
    assert shell.screen.row_text(4).startswith(PROMPT)
    assert list(shell.editor.history) == ["echo hi"]


def test_key_release_ignored():
    shell = started()
    shell.handle_key(KeyEvent(Key.CHARACTER, "x", pressed=False))
    assert shell.editor.line == ""


def test_edit_keys_dispatch_to_editor():
    shell = started()
    type_text(shell, "abc")
    shell.process_events(
        [KeyEvent(Key.ARROW_LEFT), KeyEvent(Key.BACKSPACE), KeyEvent(Key.DELETE)]
    )
    assert shell.editor.line == "a"


def test_history_keys():
    shell = started()
    type_text(shell, "version")
    shell.handle_key(KeyEvent(Key.ENTER))
    shell.handle_key(KeyEvent(Key.ARROW_UP))
    assert shell.editor.line == "version"
    shell.handle_key(KeyEvent(Key.ARROW_DOWN))
    assert shell.editor.line == ""


def test_ctrl_c_in_edit_mode():
    shell = started()
    type_text(shell, "abc")
    row = shell.editor.prompt_row
    shell.handle_key(KeyEvent(Key.CHARACTER, "c", ctrl=True))
    assert shell.editor.line == ""
    assert "^C" in shell.screen.row_text(row)
    assert shell.state is ShellState.EDIT_LINE


def test_insert_key_ignored_in_edit_mode():
    shell = started()
    before = shell.screen.cursor.insert_mode
    shell.handle_key(KeyEvent(Key.INSERT))
    assert shell.screen.cursor.insert_mode == before
    assert shell.editor.line == ""


def test_cmd_interface_mode_writes_directly():
    shell = started()
    shell.switch_mode(ShellState.CMD_INTERFACE)
    assert shell.state is ShellState.CMD_INTERFACE
    column = shell.screen.cursor.column
    row = shell.screen.cursor.row
    type_text(shell, "z")
    assert shell.screen[column, row] == "z"
    assert shell.editor.line == ""


def test_cmd_interface_enter_and_insert():
    shell = started()
    shell.switch_mode(ShellState.CMD_INTERFACE)
    before = shell.screen.cursor.insert_mode
    shell.handle_key(KeyEvent(Key.INSERT))
    assert shell.screen.cursor.insert_mode is (not before)
    row = shell.screen.cursor.row
    shell.handle_key(KeyEvent(Key.ENTER))
    assert shell.editor.prompt_row == row + 1
    assert shell.screen.row_text(row + 1).startswith(PROMPT)


def test_cmd_interface_ctrl_c():
    shell = started()
    shell.switch_mode(ShellState.CMD_INTERFACE)
    row = shell.screen.cursor.row
    shell.handle_key(KeyEvent(Key.CHARACTER, "C", ctrl=True))
    assert "^C" in shell.screen.row_text(row)
    assert shell.screen.row_text(row + 1).startswith(PROMPT)


def test_main_runs_commands(capsys):
    assert main(["echo hello"]) == 0
    out = capsys.readouterr().out
    assert "hello" in out.splitlines()
    assert out.startswith("atOShell v0.1")