"""
MoveOracle: a pure lookup of the prescribed response for a board.
"""
from __future__ import annotations

from typing import Optional

from .errors import LookupMiss
from .table import MoveTable, board_key, default_table


class MoveOracle:
    def __init__(self, table: Optional[MoveTable] = None):
        self.table = table if table is not None else default_table()

    def lookup(self, board) -> int:
        """Return the cell the table prescribes for the side to move.

        Raises LookupMiss when the table holds no entry for board, e.g. a
        finished game or a position the strategy never lets arise.
        """
        move = self.table.move_for(board)
        if move is None:
            raise LookupMiss(board_key(board))
        return move


def lookup(board) -> int:
    return MoveOracle().lookup(board)
