import pytest

from tictactoe.models import Board, GameStateError, Mark, WINNING_LINES


def _seated_board(p1_mark='X'):
    board = Board()
    board.assign_player1(p1_mark)
    board.assign_player2()
    return board


def _fill(board, layout):
    """Write a 3-row string layout ('.' = empty) straight into the grid."""
    for r, row in enumerate(layout):
        for c, ch in enumerate(row):
            board.board_state[r][c] = None if ch == '.' else Mark(ch)


def test_fresh_board():
    board = Board()
    assert board.player1 is None and board.player2 is None
    assert board.turn == 1
    assert board.winner == 0
    assert not board.is_draw
    assert not board.game_started
    assert board.status == 'awaiting_player_1'
    assert len(board.available_moves()) == 9


def test_player_assignment_is_complementary():
    board = Board()
    assert board.assign_player1('O')
    assert board.status == 'awaiting_player_2'
    assert not board.everyone_present()
    p2 = board.assign_player2()
    assert p2.id == 2 and p2.mark is Mark.X
    assert board.game_started
    assert board.everyone_present()
    assert board.status == 'in_progress'


def test_player1_is_only_assigned_once():
    board = Board()
    assert board.assign_player1('X')
    assert not board.assign_player1('O')
    assert board.player1.mark is Mark.X


def test_player2_requires_player1():
    board = Board()
    with pytest.raises(GameStateError):
        board.assign_player2()
    assert not board.game_started


def test_player2_cannot_be_assigned_twice():
    board = _seated_board()
    with pytest.raises(GameStateError):
        board.assign_player2()


def test_turn_alternates_with_each_move():
    board = _seated_board()
    cells = [(0, 0), (1, 1), (0, 1), (0, 2), (2, 0), (1, 0), (1, 2), (2, 1)]
    assert board.is_my_turn(1)
    for n, (r, c) in enumerate(cells, start=1):
        player = board.get_player(board.turn)
        board.apply_move(player, r, c)
        assert board.turn == (n % 2) + 1
        assert board.move_count == n
    assert not board.is_my_turn(2)


def test_apply_move_writes_players_mark():
    board = _seated_board('O')
    board.apply_move(board.player1, 2, 1)
    assert board.board_state[2][1] is Mark.O
    assert board.turn == 2


@pytest.mark.parametrize('row,col', [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5), (-3, 9)])
def test_out_of_range_moves_are_invalid(row, col):
    assert not Board().is_valid_move(row, col)


@pytest.mark.parametrize('row,col', [('1', 1), (1, None), (1.0, 1), (True, 0)])
def test_non_integer_moves_are_invalid(row, col):
    assert not Board().is_valid_move(row, col)


def test_occupied_cell_is_invalid():
    board = _seated_board()
    board.apply_move(board.player1, 1, 1)
    assert not board.is_valid_move(1, 1)
    assert board.is_valid_move(1, 2)


def test_every_empty_cell_is_valid():
    board = Board()
    assert all(board.is_valid_move(r, c) for r in range(3) for c in range(3))


@pytest.mark.parametrize('line', WINNING_LINES)
@pytest.mark.parametrize('mark', ['X', 'O'])
def test_each_line_wins_on_its_own(line, mark):
    board = Board()
    for r, c in line:
        board.board_state[r][c] = Mark(mark)
    assert board.detect_winner(mark)
    assert not board.detect_winner(Mark(mark).opposite())


def test_all_eight_lines_are_covered():
    assert len(set(WINNING_LINES)) == 8


def test_scattered_marks_do_not_win():
    board = Board()
    # Two in each row, one diagonal cell each: would trip a shared tally
    _fill(board, ['XX.', 'X.X', '.XX'])
    assert not board.detect_winner('X')


def test_full_board_without_line_is_draw():
    board = Board()
    _fill(board, ['XOX', 'XOO', 'OXX'])
    assert not board.detect_winner('X')
    assert not board.detect_winner('O')
    assert board.detect_draw()


def test_partial_board_is_not_draw():
    board = Board()
    _fill(board, ['XOX', 'XOO', 'OX.'])
    assert not board.detect_draw()


def test_last_move_completing_a_line_is_a_win_not_just_a_draw():
    board = Board()
    _fill(board, ['XOX', 'OXO', 'OX.'])
    board.board_state[2][2] = Mark.X
    assert board.detect_winner('X')
    assert board.detect_draw()  # board is full too, callers check the winner first


def test_restart_matches_fresh_board():
    board = _seated_board()
    board.apply_move(board.player1, 0, 0)
    board.winner = 1
    board.is_draw = True
    board.restart()
    assert board.to_dict() == Board().to_dict()
    assert board.player1 is None and board.player2 is None


def test_to_dict_shape():
    board = _seated_board()
    board.apply_move(board.player1, 0, 2)
    data = board.to_dict()
    assert data['player1'] == {'id': 1, 'type': 'X'}
    assert data['player2'] == {'id': 2, 'type': 'O'}
    assert data['board_state'][0] == [None, None, 'X']
    assert data['game_started'] is True
    assert data['turn'] == 2
    assert data['winner'] == 0
    assert data['status'] == 'in_progress'


def test_to_dict_is_a_copy():
    board = _seated_board()
    data = board.to_dict()
    board.apply_move(board.player1, 0, 0)
    assert data['board_state'][0][0] is None
