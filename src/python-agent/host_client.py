"""
Host Client - read access to the game host's per-turn state.

Usage:
    from host_client import HostClient

    client = HostClient()  # Uses default localhost:8790

    snapshot = client.get_snapshot()
    if snapshot:
        client.submit_action(Action.TAKE)

Every endpoint answers with the envelope {"success", "data", "error"}.
Failures are logged and reported as None / False, never raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from constants import DEFAULT_HOST_TIMEOUT, DEFAULT_HOST_URL, EMPTY_CELL, Action
from planning.models import FruitType, Point, as_point

logger = logging.getLogger(__name__)


# ============================================
# DATA CLASSES - Mirror host models
# ============================================

def _parse_counts(raw: Optional[Dict[Any, Any]]) -> Dict[FruitType, float]:
    """JSON object keys arrive as strings; fruit types are ints."""
    return {int(k): float(v) for k, v in (raw or {}).items()}


@dataclass
class BoardSnapshot:
    """One turn's observation. The board is column-major: board[col][row]."""
    board: List[List[int]]
    me: Point
    opponent: Point
    my_counts: Dict[FruitType, float] = field(default_factory=dict)
    opponent_counts: Dict[FruitType, float] = field(default_factory=dict)
    total_counts: Dict[FruitType, float] = field(default_factory=dict)
    game_id: str = ""
    turn: int = 0

    @property
    def width(self) -> int:
        return len(self.board)

    @property
    def height(self) -> int:
        return len(self.board[0]) if self.board else 0

    def fruit_at(self, point: Point) -> int:
        """Fruit type at the cell, 0 when empty or off the board."""
        if not (0 <= point.col < self.width and 0 <= point.row < self.height):
            return EMPTY_CELL
        return self.board[point.col][point.row]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardSnapshot":
        """Parse the data part of a /state response (also used for board files)."""
        return cls(
            board=[[int(cell) for cell in column] for column in data.get("board", [])],
            me=as_point(data.get("me", {})),
            opponent=as_point(data.get("opponent", {})),
            my_counts=_parse_counts(data.get("myItemCounts")),
            opponent_counts=_parse_counts(data.get("opponentItemCounts")),
            total_counts=_parse_counts(data.get("totalItemCounts")),
            game_id=str(data.get("gameId", "")),
            turn=int(data.get("turn", 0)),
        )


# ============================================
# HOST CLIENT
# ============================================

class HostClient:
    """Client for the host's /state and /action endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_HOST_URL,
        timeout: float = DEFAULT_HOST_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def _unwrap(self, endpoint: str, resp: httpx.Response) -> Optional[Dict[str, Any]]:
        if resp.status_code != 200:
            logger.warning(f"Host {endpoint} HTTP {resp.status_code}")
            return None
        try:
            result = resp.json()
        except ValueError as e:
            logger.warning(f"Host {endpoint} returned invalid JSON: {e}")
            return None
        if not result.get("success"):
            logger.warning(f"Host {endpoint} failed: {result.get('error')}")
            return None
        return result.get("data") or {}

    def get_snapshot(self) -> Optional[BoardSnapshot]:
        """Fetch the current board, positions and item counts."""
        try:
            resp = self._client.get("/state")
        except httpx.HTTPError as e:
            logger.warning(f"Host /state error: {e}")
            return None

        data = self._unwrap("/state", resp)
        if data is None:
            return None
        try:
            return BoardSnapshot.from_dict(data)
        except (TypeError, ValueError, KeyError) as e:
            logger.error(f"Error parsing host state: {e}")
            return None

    def submit_action(self, action: Action) -> bool:
        """Send this turn's action. Returns True when the host accepted it."""
        try:
            resp = self._client.post("/action", json={"action": action.value})
        except httpx.HTTPError as e:
            logger.warning(f"Host /action error: {e}")
            return False
        return self._unwrap("/action", resp) is not None

    def close(self) -> None:
        self._client.close()
