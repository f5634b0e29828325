"""naughts package.

A precomputed move table for naughts-and-crosses, the MoveOracle lookup
over it, and GameSession for exchanging moves one at a time.

Convenience imports are exposed for common workflows.
"""

from .errors import IllegalMoveError, LookupMiss, OccupiedCellError, OracleError
from .oracle import MoveOracle, lookup
from .session import GameSession, advance, create, play_generator
from .table import MoveTable, build_move_table, default_table

__all__ = [
    "MoveOracle",
    "lookup",
    "GameSession",
    "create",
    "advance",
    "play_generator",
    "MoveTable",
    "build_move_table",
    "default_table",
    "OracleError",
    "OccupiedCellError",
    "LookupMiss",
    "IllegalMoveError",
]
