"""Game management layer — a session per game plus its configuration.

Quick start::

    from noughts.game import GameSession

    session = GameSession()
    session.submit_move(0, 0)
    session.computer_move()
"""

from noughts.game.interfaces import GamePhase, SessionConfig
from noughts.game.session import GameEvents, GameSession, MoveRecord

__all__ = [
    "GameEvents",
    "GamePhase",
    "GameSession",
    "MoveRecord",
    "SessionConfig",
]
