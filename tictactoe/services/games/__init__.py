"""Game domain services: outcomes, the locked game session and viewer fan-out.

This package contains the game mechanics used by HTTP routes and socket
handlers, keeping transport concerns separated from the board itself.
"""

from .broadcast import ViewerBroadcaster
from .outcomes import Message, Outcome, build_message
from .session import GameSession, Result
