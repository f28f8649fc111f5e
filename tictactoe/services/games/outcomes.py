from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Outcome(Enum):
    NOT_STARTED = 'not_started'
    NOT_YOUR_TURN = 'not_your_turn'
    INVALID_MOVE = 'invalid_move'
    VALID_MOVE = 'valid_move'
    DRAW = 'draw'
    WIN = 'win'
    CANNOT_JOIN = 'cannot_join'


_TABLE = {
    Outcome.NOT_STARTED: (403, 'Please wait. Not all players have joined game'),
    Outcome.NOT_YOUR_TURN: (403, 'Not your turn'),
    Outcome.INVALID_MOVE: (403, 'Invalid Move. Please try somewhere else.'),
    Outcome.VALID_MOVE: (200, 'Valid Move'),
    Outcome.DRAW: (200, 'There is a Draw'),
    Outcome.WIN: (200, 'Player {id} Win!'),
    Outcome.CANNOT_JOIN: (403, 'Cannot join as game has already started.'),
}


@dataclass(frozen=True)
class Message:
    outcome: Outcome
    code: int
    message: str

    @property
    def move_validity(self) -> bool:
        return self.code == 200

    def to_dict(self):
        return {
            'move_validity': self.move_validity,
            'code': self.code,
            'message': self.message,
        }


def build_message(outcome: Outcome, player_id: Optional[int] = None) -> Message:
    """Map an outcome to its status code and display text.

    ``player_id`` is required for ``Outcome.WIN`` and ignored otherwise.
    """
    code, text = _TABLE[outcome]
    if outcome is Outcome.WIN:
        if player_id is None:
            raise ValueError('A win message needs the winning player id')
        text = text.format(id=player_id)
    return Message(outcome=outcome, code=code, message=text)
