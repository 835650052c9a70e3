#!/usr/bin/env python3
"""
Fruit Agent - turn-based player for the fruit grid game.

Architecture:
- HostClient: Eyes - reads the board, positions and item counts
- GameSession: Brain - one strategy per episode, one action per turn
- HostClient: Hands - submits the chosen action

Run with: python agent.py --strategy waypoint
     or:  python agent.py --board board.yaml   (decide one turn offline)
"""

import argparse
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_HOST_TIMEOUT,
    DEFAULT_HOST_URL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_STRATEGY,
    Action,
)
from execution.session import GameSession
from host_client import BoardSnapshot, HostClient

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class Config:
    """Configuration loaded from settings.yaml."""

    # Host
    host_url: str = DEFAULT_HOST_URL
    host_timeout: float = DEFAULT_HOST_TIMEOUT

    # Strategy
    strategy: str = DEFAULT_STRATEGY

    # Timing
    poll_interval: float = DEFAULT_POLL_INTERVAL

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_yaml(cls, path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Load config from YAML file."""
        config = cls()

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}

            if "host" in data:
                config.host_url = data["host"].get("url", config.host_url)
                config.host_timeout = float(data["host"].get("timeout", config.host_timeout))

            if "strategy" in data:
                config.strategy = data["strategy"].get("name", config.strategy)

            if "timing" in data:
                config.poll_interval = float(data["timing"].get("poll_interval", config.poll_interval))

            if "logging" in data:
                config.log_level = data["logging"].get("level", config.log_level)
                log_file = data["logging"].get("log_file")
                config.log_file = Path(log_file) if log_file else None

        except FileNotFoundError:
            logger.warning(f"Config file not found: {path}, using defaults")
        except (yaml.YAMLError, AttributeError, TypeError, ValueError) as e:
            logger.error(f"Error loading config: {e}, using defaults")
            return cls()

        return config


def setup_logging(config: Config) -> None:
    handlers = [logging.StreamHandler()]
    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


# =============================================================================
# Controller
# =============================================================================

class FruitBotAgent:
    """Top-level controller: owns the active session and the host loop."""

    def __init__(self, config: Optional[Config] = None, client: Optional[HostClient] = None):
        self.config = config or Config()
        self.client = client
        self.session: Optional[GameSession] = None
        self.running = False
        self._last_turn: Optional[int] = None

    def new_game(self, game_id: str = "") -> GameSession:
        """Reset entry point: drop all episode state and start fresh."""
        self.session = GameSession.start(self.config.strategy, game_id=game_id)
        self._last_turn = None
        return self.session

    def make_move(self, snapshot: BoardSnapshot) -> Action:
        """Per-turn entry point."""
        if self.session is None:
            self.new_game(snapshot.game_id)
        return self.session.play_turn(snapshot)

    def step(self) -> Optional[Action]:
        """Poll the host once; play a turn if a new one is waiting."""
        snapshot = self.client.get_snapshot()
        if snapshot is None:
            return None

        if self.session is None or snapshot.game_id != self.session.game_id:
            self.new_game(snapshot.game_id)
        if snapshot.turn == self._last_turn:
            return None

        action = self.make_move(snapshot)
        if self.client.submit_action(action):
            self._last_turn = snapshot.turn
        else:
            logger.warning(f"Host rejected {action.value} on turn {snapshot.turn}")
        return action

    def run(self, once: bool = False) -> None:
        """Main loop: one action per host turn until stopped."""
        if self.client is None:
            self.client = HostClient(self.config.host_url, self.config.host_timeout)
        self.running = True
        logger.info("=" * 60)
        logger.info("Fruit Agent Starting")
        logger.info(f"Host: {self.config.host_url}")
        logger.info(f"Strategy: {self.config.strategy}")
        logger.info("=" * 60)

        try:
            while self.running:
                action = self.step()
                if once and action is not None:
                    break
                time.sleep(self.config.poll_interval)
        except KeyboardInterrupt:
            logger.info("Agent stopped by user")
        finally:
            self.running = False
            self.client.close()

    def stop(self):
        """Stop the agent."""
        self.running = False


def load_board(path: str) -> BoardSnapshot:
    """Read a snapshot in /state data format from a YAML (or JSON) file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return BoardSnapshot.from_dict(data)


# =============================================================================
# CLI
# =============================================================================

def main():
    parser = argparse.ArgumentParser(description="Fruit grid agent")
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH,
                        help="Path to config file")
    parser.add_argument("--strategy", "-s", default=None,
                        help="Override strategy from config (closest, rarest, waypoint)")
    parser.add_argument("--board", "-b", default=None,
                        help="Decide a single turn for a board file and exit")
    parser.add_argument("--once", action="store_true",
                        help="Play one host turn and exit")
    args = parser.parse_args()

    config = Config.from_yaml(args.config)
    if args.strategy:
        config.strategy = args.strategy
    setup_logging(config)

    agent = FruitBotAgent(config)

    if args.board:
        snapshot = load_board(args.board)
        action = agent.make_move(snapshot)
        print(f"Action: {action.value}")
        executor = getattr(agent.session.strategy, "executor", None)
        if executor is not None and executor.plan:
            print(f"Plan:   {' -> '.join(str(p) for p in executor.plan)}")
        return

    agent.run(once=args.once)


if __name__ == "__main__":
    main()
