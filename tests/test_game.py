import pytest

from termtetris.game import HEIGHT, WIDTH, Game
from termtetris.rng import Rand
from termtetris.shapes import Control, make_shape
from termtetris.terminal import Color


def _game() -> Game:
    return Game(Rand(7))


def _place(game: Game, kind: str, x: int, y: int, seed: int = 1):
    shape = make_shape(kind, Rand(seed))
    shape.draw()
    shape.x = x
    shape.y = y
    game.figure = shape
    game.needs_figure = False
    return shape


def test_board_has_walls_and_empty_inside():
    game = _game()
    assert len(game.board) == 24
    assert all(len(row) == 18 for row in game.board)
    for i in range(HEIGHT):
        for j in range(WIDTH):
            border = i in (0, HEIGHT - 1) or j in (0, WIDTH - 1)
            assert game.board[i][j] == (1 if border else 0)


def test_render_board_paints_every_wall_cell(capsys):
    game = _game()
    capsys.readouterr()
    game.render_board()
    out = capsys.readouterr().out
    assert out.count(Color.BLUE.sequence) == 80
    assert out.startswith("\x1b[H\x1b[2J")


def test_new_game_waits_for_figure():
    game = _game()
    assert game.needs_figure is True
    assert game.figure is None
    assert game.is_legal(Control.DOWN) is False


def test_create_figure():
    game = _game()
    game.create_figure()
    assert game.needs_figure is False
    assert game.figure is not None
    assert game.figure.kind in "ZTOIL"
    assert len(game.figure.cells()) == 4


def test_move_down_in_open_space():
    game = _game()
    shape = _place(game, "O", 5, 5)
    game.move_figure(Control.DOWN)
    assert (shape.x, shape.y) == (6, 5)


def test_move_left_and_right_in_open_space():
    game = _game()
    shape = _place(game, "O", 5, 5)
    game.move_figure(Control.LEFT)
    assert shape.y == 4
    game.move_figure(Control.RIGHT)
    game.move_figure(Control.RIGHT)
    assert shape.y == 6


def test_left_wall_blocks():
    game = _game()
    shape = _place(game, "O", 5, 1)
    assert game.is_legal(Control.LEFT) is False
    game.move_figure(Control.LEFT)
    assert shape.y == 1


def test_right_wall_blocks():
    game = _game()
    shape = _place(game, "O", 5, 15)
    assert game.is_legal(Control.RIGHT) is False
    game.move_figure(Control.RIGHT)
    assert shape.y == 15


def test_landing_settles_figure():
    game = _game()
    shape = _place(game, "O", 21, 5)
    value = int(shape.color)
    assert game.is_legal(Control.DOWN) is False
    assert game.needs_figure is True
    assert game.figure is None
    assert game.board[21][5:7] == [value, value]
    assert game.board[22][5:7] == [value, value]
    assert game.board[20][5] == 0


def test_full_line_is_cleared_and_rows_drop():
    game = _game()
    shape = _place(game, "O", 21, 1)
    value = int(shape.color)
    for j in range(3, WIDTH - 1):
        game.board[22][j] = int(Color.RED)
    assert game.is_legal(Control.DOWN) is False
    assert game.board[22][1:3] == [value, value]
    assert game.board[22][3:17] == [0] * 14
    assert game.board[21][1:17] == [0] * 16
    assert game.score.score == 20


def test_roll_turns_figure_in_open_space():
    game = _game()
    shape = _place(game, "T", 10, 6, seed=3)
    before = shape.rotation
    game.roll_figure()
    assert shape.rotation == (before + 1) % 4


def test_is_over():
    game = _game()
    assert game.is_over() is False
    game.board[1][5] = int(Color.GREEN)
    assert game.is_over() is True


@pytest.mark.parametrize("key, dy", [("a", -1), ("d", 1)])
def test_keys_move_figure(key, dy):
    game = _game()
    shape = _place(game, "O", 5, 8)
    game._handle_key(key)
    assert shape.y == 8 + dy


def test_drop_key_settles_at_bottom():
    game = _game()
    shape = _place(game, "O", 3, 8)
    value = int(shape.color)
    game._handle_key("s")
    assert game.needs_figure is True
    assert game.board[22][8:10] == [value, value]
    assert game.board[21][8:10] == [value, value]