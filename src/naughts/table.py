"""
Precomputed move table.

The table maps a board to the response of the side to move. It is seeded
with the documented opening line and completed from the exact solver over
every position the table's own strategy can reach, for both X and O.
Entries are keyed by symmetry-canonical form, so one entry answers for the
whole orbit of a board.
"""
from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from .config import OracleConfig, config_from_env, pick_tie_break
from .game_basics import (
    EMPTY_BOARD,
    current_player,
    deserialize_board,
    is_terminal,
    is_valid_state,
    legal_moves,
    serialize_board,
)
from .solver import solve_state
from .symmetry import apply_action_transform, canonicalize, inverse_op

# The documented first-mover line: corner opening, then a forced win after
# the opponent answers on an adjacent edge.
OPENING_BOOK: Mapping[str, int] = MappingProxyType({
    "000000000": 0,
    "120000000": 6,  # X0 O1
    "120200100": 8,  # X0 O1 X6 O3
    "120220101": 7,  # X0 O1 X6 O3 X8 O4
    "120200121": 4,  # X0 O1 X6 O3 X8 O7
})


def as_board(board) -> List[int]:
    """Accept a 9-char board string or a sequence of 9 cells."""
    if isinstance(board, str):
        return deserialize_board(board)
    cells = list(board)
    if len(cells) != 9 or any(v not in (0, 1, 2) for v in cells):
        raise ValueError(f"Invalid board {cells!r}. Must be 9 cells of 0/1/2.")
    return cells


class MoveTable:
    """Immutable board -> move mapping with symmetry-aware lookup."""

    def __init__(self, entries: Mapping[str, int]):
        self._entries = MappingProxyType(dict(entries))

    @property
    def entries(self) -> Mapping[str, int]:
        """Read-only view keyed by canonical board strings."""
        return self._entries

    def move_for(self, board) -> Optional[int]:
        canon, op = canonicalize(as_board(board))
        mv = self._entries.get(canon)
        if mv is None:
            return None
        return apply_action_transform(mv, inverse_op(op))

    def __contains__(self, board) -> bool:
        return self.move_for(board) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"MoveTable({len(self)} entries)"


def _store(entries: Dict[str, int], board: List[int], move: int) -> int:
    """Record move for board unless an equivalent board is already covered.

    Returns the move that is in force for board afterwards.
    """
    canon, op = canonicalize(board)
    if canon in entries:
        return apply_action_transform(entries[canon], inverse_op(op))
    entries[canon] = apply_action_transform(move, op)
    return move


def _seed_book(entries: Dict[str, int], book: Mapping[str, int]) -> None:
    for key, move in book.items():
        board = deserialize_board(key)
        if not is_valid_state(board) or is_terminal(board):
            raise ValueError(f"Book position {key} is not a playable state")
        if not 0 <= move <= 8 or board[move] != 0:
            raise ValueError(f"Book move {move} is not legal for {key}")
        if _store(entries, board, move) != move:
            raise ValueError(f"Book move {move} for {key} conflicts with an equivalent entry")


def _choose(board: List[int], config: OracleConfig) -> int:
    sol = solve_state(tuple(board))
    return pick_tie_break(sol['optimal_moves'], config.tie_break)


def _walk(entries: Dict[str, int], starts: List[List[int]], config: OracleConfig) -> None:
    """Cover every position reachable when the side to move in starts follows the table."""
    seen = set()
    queue = deque(starts)
    while queue:
        board = queue.popleft()
        canon, _ = canonicalize(board)
        if canon in seen or is_terminal(board):
            continue
        seen.add(canon)
        own = current_player(board)
        move = _store(entries, board, _choose(board, config))
        after = board[:]
        after[move] = own
        if is_terminal(after):
            continue
        for reply in legal_moves(after):
            nxt = after[:]
            nxt[reply] = 2 if own == 1 else 1
            queue.append(nxt)


def build_move_table(
    config: Optional[OracleConfig] = None,
    book: Optional[Mapping[str, int]] = None,
) -> MoveTable:
    """Build the table for both sides.

    X is covered from the empty board, O against every X opening. With
    config.use_book the documented line is entered first and takes
    precedence over solver choices for its positions.
    """
    if config is None:
        config = OracleConfig()
    if book is None:
        book = OPENING_BOOK if config.use_book else {}
    entries: Dict[str, int] = {}
    _seed_book(entries, book)
    logging.debug("Seeded %d book entries", len(entries))

    empty = list(EMPTY_BOARD)
    _walk(entries, [empty], config)
    x_openings = []
    for mv in range(9):
        b = empty[:]
        b[mv] = 1
        x_openings.append(b)
    _walk(entries, x_openings, config)
    logging.debug("Built move table: %d entries (tie_break=%s)", len(entries), config.tie_break)
    return MoveTable(entries)


@lru_cache(maxsize=None)
def _cached_table(config: OracleConfig) -> MoveTable:
    return build_move_table(config)


def default_table() -> MoveTable:
    """Table for the environment configuration, built once per configuration."""
    return _cached_table(config_from_env())


def board_key(board) -> str:
    return serialize_board(as_board(board))
