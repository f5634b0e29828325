"""Exceptions raised by the oracle and game sessions.

All of them end the current session: the caller should discard it.
"""


class OracleError(Exception):
    pass


class OccupiedCellError(OracleError):
    """The opponent's move names a cell that is already played."""

    def __init__(self, cell: int):
        super().__init__(f"Cell {cell} is already occupied")
        self.cell = cell


class LookupMiss(OracleError, KeyError):
    """The move table has no response for a board."""

    def __init__(self, board_key: str):
        super().__init__(f"No known response for board {board_key}")
        self.board_key = board_key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class IllegalMoveError(OracleError, ValueError):
    pass
