import pytest

from termtetris.terminal import (
    Color,
    CubePoint,
    move_cursor,
    restore_cursor,
    save_cursor,
)


def test_save_cursor(capsys):
    result = save_cursor()
    assert capsys.readouterr().out == "\x1b[s"
    assert result == "\x1b[s"


def test_restore_cursor(capsys):
    restore_cursor()
    assert capsys.readouterr().out == "\x1b[u"


def test_move_cursor_ten_by_ten(capsys):
    move_cursor(10, 10)
    out = capsys.readouterr().out
    assert out == "\x1b[2C" * 10 + "\x1b[1B" * 10


def test_move_cursor_columns_before_rows(capsys):
    move_cursor(1, 2)
    assert capsys.readouterr().out == "\x1b[2C\x1b[2C\x1b[1B"


def test_move_cursor_origin_writes_nothing(capsys):
    assert move_cursor(0, 0) == ""
    assert capsys.readouterr().out == ""


def test_color_from_value():
    assert Color(34) is Color.BLUE
    assert Color.CLEAR == 0


@pytest.mark.parametrize(
    ("color", "sequence"),
    [
        (Color.BLACK, "\x1b[40;30m  \x1b[0m"),
        (Color.RED, "\x1b[41;31m  \x1b[0m"),
        (Color.GREEN, "\x1b[42;32m  \x1b[0m"),
        (Color.YELLOW, "\x1b[43;33m  \x1b[0m"),
        (Color.BLUE, "\x1b[44;34m  \x1b[0m"),
        (Color.PURPLE, "\x1b[45;35m  \x1b[0m"),
        (Color.DEEP_GREEN, "\x1b[46;36m  \x1b[0m"),
        (Color.WHITE, "\x1b[47;37m  \x1b[0m"),
        (Color.CLEAR, "\x1b[8m"),
    ],
)
def test_render_colors(capsys, color, sequence):
    CubePoint(color, 0, 0).render()
    assert capsys.readouterr().out == "\x1b[s" + sequence + "\x1b[u"


def test_render_moves_to_location(capsys):
    CubePoint(Color.BLUE, 2, 1).render()
    out = capsys.readouterr().out
    assert out == "\x1b[s\x1b[2C\x1b[1B\x1b[1B\x1b[44;34m  \x1b[0m\x1b[u"


def test_erase_writes_blank_cell(capsys):
    CubePoint(Color.RED, 1, 1).erase()
    assert capsys.readouterr().out == "\x1b[s\x1b[2C\x1b[1B  \x1b[u"


def test_default_point_is_clear_at_origin(capsys):
    point = CubePoint()
    assert point.color is Color.CLEAR
    assert (point.x, point.y) == (0, 0)
    point.render()
    assert capsys.readouterr().out == "\x1b[s\x1b[8m\x1b[u"