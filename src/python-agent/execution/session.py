"""
Game Session - everything that lives for exactly one episode.

A new episode never reuses anything from the previous one: the fruit stash,
the committed plan and the refinement cache all hang off the session's
strategy, so resetting is constructing a new session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from constants import DEFAULT_STRATEGY, Action

from .strategies import BaseStrategy, create_strategy

if TYPE_CHECKING:
    from host_client import BoardSnapshot

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    strategy: BaseStrategy
    game_id: str = ""
    turns_played: int = 0

    @classmethod
    def start(cls, strategy_name: str = DEFAULT_STRATEGY, game_id: str = "") -> "GameSession":
        logger.info(f"New episode {game_id or '(unnamed)'} with strategy {strategy_name}")
        return cls(strategy=create_strategy(strategy_name), game_id=game_id)

    def play_turn(self, snapshot: "BoardSnapshot") -> Action:
        """Process one observation and return exactly one action."""
        self.strategy.update_state(snapshot)
        action = self.strategy.decide_move()
        self.turns_played += 1
        logger.debug(f"Turn {snapshot.turn}: at {snapshot.me} -> {action.value}")
        return action
