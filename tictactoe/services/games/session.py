import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

from tictactoe.models import Board, Move
from .outcomes import Message, Outcome, build_message


@dataclass(frozen=True)
class Result:
    """What a game action produced.

    ``snapshot`` is the serialized board taken under the session lock, and
    is only set when the action changed the board.
    """
    message: Optional[Message] = None
    snapshot: Optional[Dict[str, Any]] = None

    @property
    def changed(self) -> bool:
        return self.snapshot is not None


class GameSession:
    """Owns the single in-memory board and serializes access to it.

    Every check-then-mutate sequence runs while holding ``lock`` so two
    concurrent requests can never both validate against a stale board.
    """

    def __init__(self, board: Optional[Board] = None):
        self.board = board or Board()
        self.lock = threading.Lock()

    def snapshot(self) -> Dict[str, Any]:
        with self.lock:
            return self.board.to_dict()

    def restart(self) -> Result:
        with self.lock:
            self.board.restart()
            return Result(snapshot=self.board.to_dict())

    def start(self, mark) -> Result:
        with self.lock:
            assigned = self.board.assign_player1(mark)
            snapshot = self.board.to_dict()
        return Result(snapshot=snapshot if assigned else None)

    def join(self) -> Result:
        with self.lock:
            if self.board.player1 is None:
                return Result(message=build_message(Outcome.NOT_STARTED))
            if self.board.game_started:
                return Result(message=build_message(Outcome.CANNOT_JOIN))
            self.board.assign_player2()
            return Result(snapshot=self.board.to_dict())

    def move(self, player_id: int, row: int, col: int) -> Result:
        with self.lock:
            board = self.board
            if not board.everyone_present():
                return Result(message=build_message(Outcome.NOT_STARTED))
            if board.is_over():
                return Result(message=build_message(Outcome.INVALID_MOVE))
            if not board.is_my_turn(player_id):
                return Result(message=build_message(Outcome.NOT_YOUR_TURN))
            if not board.is_valid_move(row, col):
                return Result(message=build_message(Outcome.INVALID_MOVE))

            move = Move(board.get_player(player_id), row, col)
            board.apply_move(move.player, move.row, move.col)

            # A last move can complete a line and fill the board; win first
            if board.detect_winner(move.player.mark):
                board.winner = move.player.id
                message = build_message(Outcome.WIN, move.player.id)
            elif board.detect_draw():
                board.is_draw = True
                message = build_message(Outcome.DRAW)
            else:
                message = build_message(Outcome.VALID_MOVE)
            return Result(message=message, snapshot=board.to_dict())
