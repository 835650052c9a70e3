"""
Centralized constants for the fruit agent.

Action values are the strings the host expects on the wire. Defaults below
are used whenever settings.yaml leaves a value out.
"""

from enum import Enum


class Action(Enum):
    """The six moves the host accepts once per turn."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    TAKE = "take"
    PASS = "pass"


# Cardinal unit steps as (d_col, d_row); rows grow to the south
MOVE_DELTAS = {
    Action.NORTH: (0, -1),
    Action.SOUTH: (0, 1),
    Action.EAST: (1, 0),
    Action.WEST: (-1, 0),
}

# =============================================================================
# DEFAULTS
# =============================================================================
DEFAULT_HOST_URL = "http://localhost:8790"
DEFAULT_HOST_TIMEOUT = 5.0
DEFAULT_POLL_INTERVAL = 0.2
DEFAULT_STRATEGY = "waypoint"
DEFAULT_CONFIG_PATH = "./config/settings.yaml"

EMPTY_CELL = 0
