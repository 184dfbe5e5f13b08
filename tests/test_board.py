import pytest

from laddersim.board import MAX_LADDERS, MAX_SNAKES, Board, Jump, classic_board


def test_classic_board_resolves_snake():
    assert classic_board().resolve_jump(16) == 6


def test_classic_board_resolves_ladder():
    assert classic_board().resolve_jump(1) == 38


def test_plain_square_is_unchanged():
    board = classic_board()
    assert board.resolve_jump(5) == 5


def test_classic_board_layout_order():
    board = classic_board()
    assert len(board.snakes) == 10
    assert len(board.ladders) == 9
    assert board.ladders[0] == Jump(1, 38)
    assert board.snakes[-1] == Jump(98, 78)
    assert board.size == 100


def test_classic_board_custom_size():
    assert classic_board(50).size == 50


def test_snakes_take_priority_over_ladders():
    board = Board(30)
    board.add_ladder(10, 20)
    board.add_snake(10, 2)
    assert board.resolve_jump(10) == 2


def test_first_matching_snake_wins():
    board = Board(30)
    board.add_snake(10, 3)
    board.add_snake(10, 7)
    assert board.resolve_jump(10) == 3


@pytest.mark.parametrize("count", [MAX_SNAKES, MAX_SNAKES + 5])
def test_snake_limit(count):
    board = Board(200)
    for i in range(count):
        board.add_snake(i + 50, i)
    assert len(board.snakes) == MAX_SNAKES
    assert board.snakes[-1] == Jump(50 + MAX_SNAKES - 1, MAX_SNAKES - 1)


def test_ladder_limit():
    board = Board(200)
    for i in range(MAX_LADDERS + 3):
        board.add_ladder(i, i + 50)
    assert len(board.ladders) == MAX_LADDERS
    assert board.resolve_jump(MAX_LADDERS) == MAX_LADDERS


def test_describe_lists_jumps():
    board = Board(10)
    board.add_snake(5, 1)
    board.add_ladder(2, 8)
    assert board.describe() == "Snakes:\n  5 -> 1\nLadders:\n  2 -> 8\n"


def test_describe_empty_board():
    assert Board(10).describe() == "Snakes:\nLadders:\n"