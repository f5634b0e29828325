"""
Stateful move exchange over a MoveOracle.

A GameSession owns one board. Each call to advance() takes the opponent's
cell (none on the very first call when the session moves first), marks it,
and answers with the oracle's response.
"""
from __future__ import annotations

import logging
from typing import Generator, List, Optional, Tuple

from .errors import IllegalMoveError, LookupMiss, OccupiedCellError
from .game_basics import get_winner, is_terminal, other_player, serialize_board
from .oracle import MoveOracle
from .table import MoveTable


class GameSession:
    def __init__(self, oracle: Optional[MoveOracle] = None):
        self._oracle = oracle if oracle is not None else MoveOracle()
        self._board: List[int] = [0] * 9
        self._history: List[int] = []
        self._own_mark: Optional[int] = None

    @classmethod
    def create(cls, table: Optional[MoveTable] = None) -> "GameSession":
        return cls(MoveOracle(table))

    @property
    def board(self) -> List[int]:
        return self._board[:]

    @property
    def history(self) -> Tuple[int, ...]:
        return tuple(self._history)

    @property
    def own_mark(self) -> Optional[int]:
        """1 when the session moved first, 2 when it answers X; None before any move."""
        return self._own_mark

    @property
    def winner(self) -> int:
        return get_winner(self._board)

    @property
    def finished(self) -> bool:
        return is_terminal(self._board)

    def advance(self, opponent_move: Optional[int] = None) -> Optional[int]:
        """Play one exchange and return the session's own move.

        Returns None when the opponent's move ends the game, leaving
        nothing to answer.
        """
        if self.finished:
            raise IllegalMoveError("The game is over")
        if opponent_move is None:
            if self._history:
                raise IllegalMoveError("An opponent move is required after the opening")
            self._own_mark = 1
            try:
                return self._respond()
            except LookupMiss:
                self._own_mark = None
                raise

        if isinstance(opponent_move, bool) or not isinstance(opponent_move, int) \
                or not 0 <= opponent_move <= 8:
            raise IllegalMoveError(f"Cell must be an integer in 0..8, got {opponent_move!r}")
        if self._board[opponent_move] != 0:
            raise OccupiedCellError(opponent_move)

        prev_mark = self._own_mark
        if self._own_mark is None:
            self._own_mark = 2
        self._board[opponent_move] = other_player(self._own_mark)
        self._history.append(opponent_move)
        if self.finished:
            logging.debug("Opponent move %d ends the game: %s", opponent_move, serialize_board(self._board))
            return None
        try:
            return self._respond()
        except LookupMiss:
            self._board[opponent_move] = 0
            self._history.pop()
            self._own_mark = prev_mark
            raise

    def _respond(self) -> int:
        move = self._oracle.lookup(self._board)
        self._board[move] = self._own_mark
        self._history.append(move)
        logging.debug("Session responds %d -> %s", move, serialize_board(self._board))
        return move


def create(table: Optional[MoveTable] = None) -> GameSession:
    return GameSession.create(table)


def advance(session: GameSession, opponent_move: Optional[int] = None) -> Optional[int]:
    return session.advance(opponent_move)


def play_generator(
    table: Optional[MoveTable] = None,
    moves_first: bool = True,
) -> Generator[Optional[int], int, None]:
    """Drive a session with send().

    When moving first, next() yields the opening move; otherwise next()
    yields None and the first send() carries X's opening. Each send() of
    the opponent's cell yields the response. The generator stops once the
    board is finished.
    """
    session = create(table)
    reply = session.advance() if moves_first else None
    while not session.finished:
        opponent = yield reply
        reply = session.advance(opponent)
    if reply is not None:
        yield reply
