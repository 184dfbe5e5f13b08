import pytest

from laddersim.graph import MAX_EDGES, GraphBoard, create_board


def test_size_is_rows_times_cols():
    board = create_board(3, 4)
    assert board.size == 12
    assert (board.rows, board.cols) == (3, 4)


def test_plain_board_has_no_edges():
    board = create_board(2, 5)
    assert all(board.neighbours(square) == [] for square in range(board.size))


def test_connected_board_links_next_six_newest_first():
    board = create_board(3, 4, connect_moves=True)
    assert board.neighbours(0) == [6, 5, 4, 3, 2, 1]
    assert len(board.neighbours(0)) == MAX_EDGES


def test_connected_board_stops_at_last_square():
    board = create_board(3, 4, connect_moves=True)
    assert board.neighbours(board.size - 1) == []
    assert board.neighbours(9) == [11, 10]
    for square in range(board.size):
        assert all(square < dest < board.size for dest in board.neighbours(square))


def test_add_edge_prepends():
    board = create_board(2, 2)
    board.add_edge(0, 3)
    board.add_edge(0, 1)
    assert board.neighbours(0) == [1, 3]
    assert board.neighbours(1) == []


@pytest.mark.parametrize("rows, cols", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_dimensions(rows, cols):
    with pytest.raises(ValueError):
        create_board(rows, cols)


def test_edge_from_square_off_board():
    board = GraphBoard(2, 2)
    with pytest.raises(IndexError):
        board.add_edge(4, 0)
    with pytest.raises(IndexError):
        board.neighbours(-1)