from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

BOARD_SIZE = 3

# Every line that wins the game: 3 rows, 3 columns, 2 diagonals
WINNING_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class GameStateError(Exception):
    """Raised when a board operation is called in a state that forbids it."""


class Mark(str, Enum):
    X = 'X'
    O = 'O'

    def opposite(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class Player:
    def __init__(self, mark: Mark, player_id: int):
        self.mark = Mark(mark)
        self.id = player_id

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.mark.value,
        }


@dataclass(frozen=True)
class Move:
    player: Player
    row: int
    col: int


class Board:
    """A 3x3 game board for two players.

    - player1 / player2: the two player slots, None until assigned
    - game_started: True once player 2 has joined
    - turn: id of the player whose move is accepted next (starts at 1)
    - board_state: 3x3 grid of Mark or None
    - winner: id of the winning player, 0 while there is none
    - is_draw: True once the board filled up with no winner
    """

    def __init__(self):
        self.restart()

    def restart(self) -> None:
        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None
        self.game_started = False
        self.turn = 1
        self.move_count = 0
        self.board_state: List[List[Optional[Mark]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.winner = 0
        self.is_draw = False

    # ---- Player registry ----

    def assign_player1(self, mark) -> bool:
        """Seat player 1 with the given mark. No-op if the seat is taken."""
        if self.player1 is not None:
            return False
        self.player1 = Player(mark, 1)
        return True

    def assign_player2(self) -> Player:
        """Seat player 2 with the mark opposite to player 1 and start the game."""
        if self.player1 is None:
            raise GameStateError('Player 1 has not joined yet')
        if self.player2 is not None:
            raise GameStateError('Player 2 has already joined')
        self.player2 = Player(self.opposite_mark(), 2)
        self.game_started = True
        return self.player2

    def opposite_mark(self) -> Mark:
        if self.player1 is None:
            raise GameStateError('Player 1 has not joined yet')
        return self.player1.mark.opposite()

    def get_player(self, player_id: int) -> Optional[Player]:
        for player in (self.player1, self.player2):
            if player is not None and player.id == player_id:
                return player
        return None

    def everyone_present(self) -> bool:
        return self.player1 is not None and self.player2 is not None

    # ---- Moves ----

    def is_my_turn(self, player_id: int) -> bool:
        return self.turn == player_id

    def is_valid_move(self, row, col) -> bool:
        for coord in (row, col):
            if isinstance(coord, bool) or not isinstance(coord, int):
                return False
            if not 0 <= coord < BOARD_SIZE:
                return False
        return self.board_state[row][col] is None

    def apply_move(self, player: Player, row: int, col: int) -> None:
        """Write the player's mark and pass the turn. Callers validate first."""
        self.board_state[row][col] = player.mark
        self.move_count += 1
        self.turn = 2 if player.id == 1 else 1

    def available_moves(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
            if self.board_state[r][c] is None
        ]

    # ---- Outcome detection ----

    def detect_winner(self, mark) -> bool:
        mark = Mark(mark)
        for line in WINNING_LINES:
            if all(self.board_state[r][c] is mark for r, c in line):
                return True
        return False

    def detect_draw(self) -> bool:
        """True when no empty cell is left. Check detect_winner first."""
        return not self.available_moves()

    def is_over(self) -> bool:
        return self.winner != 0 or self.is_draw

    @property
    def status(self) -> str:
        if self.winner:
            return 'won'
        if self.is_draw:
            return 'draw'
        if self.player1 is None:
            return 'awaiting_player_1'
        if self.player2 is None:
            return 'awaiting_player_2'
        return 'in_progress'

    def to_dict(self):
        return {
            'player1': self.player1.to_dict() if self.player1 else None,
            'player2': self.player2.to_dict() if self.player2 else None,
            'game_started': self.game_started,
            'turn': self.turn,
            'board_state': [
                [cell.value if cell else None for cell in row]
                for row in self.board_state
            ],
            'winner': self.winner,
            'is_draw': self.is_draw,
            'move_count': self.move_count,
            'status': self.status,
        }
