import pytest

from atos.screen import (
    AMOUNT_OF_COLS,
    AMOUNT_OF_ROWS,
    BLANK,
    BLINK_INTERVAL,
    CHAR_HEIGHT,
    CHAR_SPACING,
    CHAR_WIDTH,
    SCROLL_PROCESS_INTERVAL,
    TAB_WIDTH,
    CursorStyle,
    TextScreen,
    col_to_pix,
    row_to_pix,
)


def small(columns=8, rows=3):
    return TextScreen(columns=columns, rows=rows)


def test_pixel_conversion():
    assert col_to_pix(0) == 0
    assert row_to_pix(0) == 0
    assert col_to_pix(5) - col_to_pix(4) == CHAR_WIDTH + CHAR_SPACING
    assert row_to_pix(7) - row_to_pix(6) == CHAR_HEIGHT + CHAR_SPACING


def test_default_screen_fits_display():
    screen = TextScreen()
    assert screen.columns == AMOUNT_OF_COLS
    assert screen.rows == AMOUNT_OF_ROWS
    assert col_to_pix(screen.columns) <= 1024
    assert row_to_pix(screen.rows) <= 768


def test_initial_state():
    screen = small()
    assert screen.cursor.column == 0 and screen.cursor.row == 0
    assert screen.cursor.style is CursorStyle.BLOCK
    assert screen.cursor.insert_mode is True
    assert screen.row_text(0) == BLANK * screen.columns


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        TextScreen(columns=0, rows=3)


def test_puts_writes_and_counts():
    screen = small()
    text = "ab"
    assert screen.puts(text) == len(text)
    assert screen.row_text(0).startswith(text)
    assert screen.cursor.column == len(text)


def test_putc_rejects_multiple_characters():
    with pytest.raises(ValueError):
        small().putc("ab")


def test_insert_mode_pushes_right():
    screen = small()
    screen.puts("ab")
    screen.cursor.column = 0
    screen.putc("x")
    assert screen.row_text(0).startswith("xab")


def test_overwrite_mode_replaces():
    screen = small()
    screen.puts("ab")
    assert screen.toggle_insert_mode() is False
    screen.cursor.column = 0
    screen.putc("x")
    assert screen.row_text(0).startswith("xb" + BLANK)


def test_insert_drops_last_column():
    screen = small(columns=4)
    screen.puts("abc")
    screen.cursor.column = 0
    screen.putc("x")
    assert screen.row_text(0) == "xabc"[: screen.columns]


def test_newline_and_carriage_return():
    screen = small()
    screen.puts("ab\ncd")
    assert screen.row_text(1).startswith("cd")
    assert screen.cursor.row == 1
    screen.putc("\r")
    assert screen.cursor.column == 0 and screen.cursor.row == 1


def test_tab_moves_to_tab_stop():
    screen = small()
    screen.puts("a\t")
    assert screen.cursor.column % TAB_WIDTH == 0
    assert screen.cursor.column > 0
    assert screen.row_text(0).startswith("a" + BLANK)


def test_wraps_at_right_edge():
    screen = small(columns=4)
    screen.puts("abcde")
    assert screen.row_text(0) == "abcd"
    assert screen.row_text(1).startswith("e")


def test_scroll_when_past_bottom():
    screen = small(columns=4, rows=2)
    screen.puts("a\nb\nc")
    assert screen.row_text(0).startswith("b")
    assert screen.row_text(1).startswith("c")
    assert screen.cursor.row == screen.rows - 1
    assert screen.pending_scrolls == 1


def test_backspace_at_origin_does_nothing():
    screen = small()
    screen.backspace()
    assert screen.cursor.column == 0 and screen.cursor.row == 0
    assert screen.row_text(0) == BLANK * screen.columns


def test_backspace_deletes_previous():
    screen = small()
    screen.puts("abc")
    screen.cursor.column = 2
    screen.backspace()
    assert screen.row_text(0).startswith("ac" + BLANK)
    assert screen.cursor.column == 1


def test_backspace_at_row_start_goes_to_previous_row():
    screen = small(columns=4)
    screen.puts("abcd")
    assert screen.cursor.row == 1
    screen.backspace()
    assert screen.cursor.row == 0
    assert screen.cursor.column == screen.columns - 1
    assert screen.row_text(0) == "abc" + BLANK


def test_delete_char_under_cursor():
    screen = small()
    screen.puts("abc")
    screen.cursor.column = 0
    screen.delete_char()
    assert screen.row_text(0).startswith("bc" + BLANK)
    assert screen.cursor.column == 0


def test_arrow_left_wraps_to_previous_row():
    screen = small()
    screen.cursor.row = 1
    screen.arrow_left()
    assert screen.cursor.row == 0
    assert screen.cursor.column == screen.columns - 1
    screen.cursor.column = 0
    screen.arrow_left()
    assert screen.cursor.row == 0 and screen.cursor.column == 0


def test_arrow_right_wraps_and_stops_at_corner():
    screen = small()
    screen.cursor.column = screen.columns - 1
    screen.arrow_right()
    assert screen.cursor.row == 1 and screen.cursor.column == 0
    screen.cursor.row = screen.rows - 1
    screen.cursor.column = screen.columns - 1
    screen.arrow_right()
    assert screen.cursor.row == screen.rows - 1
    assert screen.cursor.column == screen.columns - 1
    assert screen.pending_scrolls == 0


def test_arrow_up_and_down_are_bounded():
    screen = small()
    screen.arrow_up()
    assert screen.cursor.row == 0
    for _ in range(screen.rows + 2):
        screen.arrow_down()
    assert screen.cursor.row == screen.rows - 1
    screen.arrow_up()
    assert screen.cursor.row == screen.rows - 2


def test_column_dec_and_row_dec():
    screen = small()
    screen.cursor.row = 1
    screen.column_dec()
    assert (screen.cursor.column, screen.cursor.row) == (screen.columns - 1, 0)
    screen.row_dec()
    assert screen.cursor.row == 0


def test_blink_toggles_on_interval():
    screen = small()
    assert screen.blink(0) is True
    assert screen.blink(BLINK_INTERVAL) is False
    assert screen.blink(BLINK_INTERVAL + 1) is False
    assert screen.blink(2 * BLINK_INTERVAL) is True


def test_blink_disabled_keeps_cursor_shown():
    screen = small()
    screen.blink(BLINK_INTERVAL)
    screen.set_cursor_blink(False)
    assert screen.blink(2 * BLINK_INTERVAL) is True
    assert screen.blink(3 * BLINK_INTERVAL) is True


def test_invisible_cursor_never_shows():
    screen = small()
    screen.set_cursor_visible(False)
    assert screen.blink(0) is False
    assert screen.cursor.visible is False


def test_blink_settles_pending_scrolls():
    screen = small(columns=4, rows=1)
    screen.puts("a\nb")
    assert screen.pending_scrolls > 0
    screen.blink(0)
    assert screen.pending_scrolls > 0
    screen.blink(SCROLL_PROCESS_INTERVAL)
    assert screen.pending_scrolls == 0


def test_clear_blanks_cells_and_keeps_cursor():
    screen = small()
    screen.puts("hi\nthere")
    position = (screen.cursor.column, screen.cursor.row)
    screen.clear()
    assert all(screen.row_text(r) == BLANK * screen.columns for r in range(screen.rows))
    assert (screen.cursor.column, screen.cursor.row) == position


def test_cell_access():
    screen = small()
    screen[2, 1] = "z"
    assert screen[2, 1] == "z"
    assert screen.row_text(1)[2] == "z"
    with pytest.raises(IndexError):
        screen[screen.columns, 0]
    with pytest.raises(IndexError):
        screen.row_text(screen.rows)


def test_row_text_length_invariant():
    screen = small(columns=5, rows=2)
    screen.puts("hello\tworld\nagain")
    assert all(len(screen.row_text(r)) == screen.columns for r in range(screen.rows))