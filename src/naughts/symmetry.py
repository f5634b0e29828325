"""
Symmetries of the 3x3 board.

There are 8 (the dihedral group of the square). A board is canonicalized by
taking the lexicographically smallest serialized image; cell indices move
with the board through precomputed index maps.
"""
from functools import lru_cache
from typing import Dict, List, Tuple

import numpy as np

from .game_basics import serialize_board

ALL_SYMS = ['id', 'rot90', 'rot180', 'rot270', 'hflip', 'vflip', 'd1', 'd2']

INVERSE_SYMS = {
    'id': 'id',
    'rot90': 'rot270',
    'rot180': 'rot180',
    'rot270': 'rot90',
    'hflip': 'hflip',
    'vflip': 'vflip',
    'd1': 'd1',
    'd2': 'd2',
}

# rot90 turns the grid clockwise; hflip mirrors left/right, vflip top/bottom;
# d1 mirrors across the main diagonal (0-4-8), d2 across the anti-diagonal.
_GRID_OPS = {
    'id': lambda g: g,
    'rot90': lambda g: np.rot90(g, k=-1),
    'rot180': lambda g: np.rot90(g, k=2),
    'rot270': lambda g: np.rot90(g, k=1),
    'hflip': np.fliplr,
    'vflip': np.flipud,
    'd1': lambda g: g.T,
    'd2': lambda g: np.rot90(g, k=2).T,
}


def transform_board(board, kind: str) -> List[int]:
    try:
        op = _GRID_OPS[kind]
    except KeyError:
        raise ValueError(f"Unknown transformation: {kind}") from None
    grid = np.asarray(board, dtype=np.int8).reshape(3, 3)
    return [int(v) for v in op(grid).ravel()]


def _sym_index_map(kind: str) -> List[int]:
    # image of the cell labels tells where each source cell lands
    moved = transform_board(list(range(9)), kind)
    mapping = [0] * 9
    for dest, src in enumerate(moved):
        mapping[src] = dest
    return mapping


SYMM_INDEX_MAPS: Dict[str, List[int]] = {k: _sym_index_map(k) for k in ALL_SYMS}


def apply_action_transform(action: int, kind: str) -> int:
    return SYMM_INDEX_MAPS[kind][action]


def inverse_op(kind: str) -> str:
    return INVERSE_SYMS[kind]


@lru_cache(maxsize=None)
def _canonicalize_tuple(board_t: tuple) -> Tuple[str, str]:
    images = [(serialize_board(transform_board(board_t, k)), k) for k in ALL_SYMS]
    # min() keeps the first of equal images, so ties go to the earliest op
    return min(images, key=lambda x: x[0])


def canonicalize(board) -> Tuple[str, str]:
    """Return (canonical_form, op) where transform_board(board, op) is canonical."""
    return _canonicalize_tuple(tuple(board))


def orbit(board) -> List[str]:
    """Distinct serialized images of board, sorted."""
    return sorted({serialize_board(transform_board(board, k)) for k in ALL_SYMS})
