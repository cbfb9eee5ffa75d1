"""Game-layer enums and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from noughts.engine.search import SelectorKind


class GamePhase(IntEnum):
    """Finite-state-machine states for a single game."""

    AWAITING_MOVE = auto()
    THINKING = auto()  # selector is computing
    GAME_OVER = auto()


@dataclass(slots=True, frozen=True)
class SessionConfig:
    """Settings shared by every game a front end starts."""

    selector: SelectorKind = SelectorKind.MINIMAX
