"""
Board primitives for naughts-and-crosses.

A board is a list of 9 ints in row-major order: 0 empty, 1 X, 2 O.
X always moves first.
"""
from typing import List, Tuple

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diags
]

EMPTY_BOARD = (0,) * 9


def serialize_board(board) -> str:
    return ''.join(str(v) for v in board)


def deserialize_board(s: str) -> List[int]:
    raw = s.strip()
    if len(raw) != 9 or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {s!r}. Must be 9 chars of 0/1/2.")
    return [int(c) for c in raw]


def _line_owners(board) -> List[int]:
    owners = []
    for a, b, c in WIN_PATTERNS:
        if board[a] != 0 and board[a] == board[b] == board[c]:
            owners.append(board[a])
    return owners


def get_winner(board) -> int:
    owners = _line_owners(board)
    return owners[0] if owners else 0


def is_draw(board) -> bool:
    return all(v != 0 for v in board) and get_winner(board) == 0


def is_terminal(board) -> bool:
    return get_winner(board) != 0 or all(v != 0 for v in board)


def get_piece_counts(board) -> Tuple[int, int]:
    return list(board).count(1), list(board).count(2)


def current_player(board) -> int:
    x, o = get_piece_counts(board)
    return 1 if x == o else 2


def other_player(player: int) -> int:
    return 2 if player == 1 else 1


def legal_moves(board) -> List[int]:
    return [i for i, v in enumerate(board) if v == 0]


def is_valid_state(board) -> bool:
    """True if the board can arise from legal play starting with X."""
    if len(board) != 9 or any(v not in (0, 1, 2) for v in board):
        return False
    x, o = get_piece_counts(board)
    if not (x == o or x == o + 1):
        return False
    owners = set(_line_owners(board))
    if len(owners) > 1:
        return False
    # the winner must have made the last move
    if 1 in owners and x != o + 1:
        return False
    if 2 in owners and x != o:
        return False
    return True
