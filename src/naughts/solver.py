"""
Exact game-theoretic solver (minimax with memoization), from the side-to-move perspective.
Tie-break policy:
- Prefer win over draw over loss.
- Among wins/draws, prefer shorter distance (plies) to termination.
- Among losses, prefer longer distance (delay the loss).
"""
from functools import lru_cache
from typing import Dict, List, Optional

from .game_basics import current_player, get_winner, is_draw, legal_moves


def apply_move_t(board_t: tuple, idx: int, player: int) -> tuple:
    lst = list(board_t)
    lst[idx] = player
    return tuple(lst)


def _prefer(q: int, dtt: int, best_val: int, best_dtt: int) -> int:
    """1 if (q, dtt) beats the incumbent, 0 if it ties, -1 if worse."""
    order = {+1: 2, 0: 1, -1: 0}
    if order[q] != order[best_val]:
        return 1 if order[q] > order[best_val] else -1
    if dtt == best_dtt:
        return 0
    if q == -1:
        return 1 if dtt > best_dtt else -1
    return 1 if dtt < best_dtt else -1


@lru_cache(maxsize=None)
def solve_state(board_t: tuple) -> Dict:
    if get_winner(board_t) != 0:
        # the side to move faces a finished line: the previous mover won
        return {'value': -1, 'plies_to_end': 0, 'optimal_moves': tuple()}
    if is_draw(board_t):
        return {'value': 0, 'plies_to_end': 0, 'optimal_moves': tuple()}
    p = current_player(board_t)
    best_val: Optional[int] = None
    best_dtt: Optional[int] = None
    best_moves: List[int] = []
    for mv in legal_moves(board_t):
        child = solve_state(apply_move_t(board_t, mv, p))
        q = -child['value']
        dtt = 1 + child['plies_to_end']
        if best_val is None:
            best_val, best_dtt, best_moves = q, dtt, [mv]
            continue
        cmp = _prefer(q, dtt, best_val, best_dtt)
        if cmp > 0:
            best_val, best_dtt, best_moves = q, dtt, [mv]
        elif cmp == 0:
            best_moves.append(mv)
    return {
        'value': best_val,
        'plies_to_end': best_dtt,
        'optimal_moves': tuple(sorted(best_moves)),
    }
