import pytest

from naughts.errors import IllegalMoveError, LookupMiss, OccupiedCellError
from naughts.session import GameSession, advance, create, play_generator
from naughts.table import MoveTable


def test_documented_exchange():
    s = create()
    assert advance(s) == 0
    assert advance(s, 1) == 6
    assert advance(s, 3) == 8
    assert s.board == [1, 2, 0, 2, 0, 0, 1, 0, 1]
    assert s.history == (0, 1, 6, 3, 8)
    assert s.own_mark == 1


def test_documented_line_finishes_with_a_win():
    s = create()
    advance(s)
    advance(s, 1)
    advance(s, 3)
    assert advance(s, 4) == 7
    assert s.finished
    assert s.winner == 1


def test_occupied_cell_leaves_board_unchanged():
    s = create()
    advance(s)
    advance(s, 1)
    before = s.board
    for cell in (0, 1, 6):
        with pytest.raises(OccupiedCellError) as ei:
            advance(s, cell)
        assert ei.value.cell == cell
    assert s.board == before
    assert s.history == (0, 1, 6)


def test_illegal_calls():
    s = create()
    advance(s)
    with pytest.raises(IllegalMoveError):
        advance(s)
    for bad in (-1, 9, True, "3"):
        with pytest.raises(IllegalMoveError):
            advance(s, bad)  # type: ignore[arg-type]
    assert s.history == (0,)


def test_second_mover_answers_x():
    s = GameSession.create()
    reply = s.advance(0)
    assert s.own_mark == 2
    assert reply == 4  # only the centre holds a draw against a corner opening
    assert s.board[0] == 1 and s.board[4] == 2


def test_second_mover_game_ends_on_opponent_move():
    s = create()
    reply = s.advance(0)
    # X always takes the lowest empty cell
    while reply is not None and not s.finished:
        reply = s.advance(s.board.index(0))
    assert s.finished
    assert s.winner != 1
    with pytest.raises(IllegalMoveError):
        s.advance(0)


def test_lookup_miss_rolls_back_opponent_move():
    s = GameSession.create(MoveTable({"000000000": 0}))
    assert s.advance() == 0
    with pytest.raises(LookupMiss):
        s.advance(4)
    assert s.board == [1, 0, 0, 0, 0, 0, 0, 0, 0]
    assert s.history == (0,)


def test_generator_adapter():
    gen = play_generator()
    assert next(gen) == 0
    assert gen.send(1) == 6
    assert gen.send(3) == 8
    assert gen.send(7) == 4
    with pytest.raises(StopIteration):
        gen.send(5)


def test_generator_as_second_mover():
    gen = play_generator(moves_first=False)
    assert next(gen) is None
    assert gen.send(0) == 4
