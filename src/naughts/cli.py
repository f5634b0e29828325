from __future__ import annotations

import argparse
import logging
import sys

from .config import config_from_env
from .errors import OracleError
from .game_basics import deserialize_board, is_valid_state
from .oracle import MoveOracle
from .session import GameSession


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="naughts", description="Naughts-and-crosses move oracle")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_look = sub.add_parser("lookup", help="Print the prescribed move for a board (9 digits, 0=empty,1=X,2=O)")
    p_look.add_argument("--board", required=True, help="Board string, e.g., 120000000")

    sub.add_parser(
        "play",
        help="Exchange moves over stdin: one opponent cell per line; an empty first line lets the oracle open",
    )
    return p


def _parse_board(raw: str):
    b = deserialize_board(raw)
    if not is_valid_state(b):
        raise ValueError("Board is not a valid reachable state.")
    return b


def _play(session: GameSession) -> int:
    first = True
    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            if not first:
                continue
            reply = session.advance()
        else:
            try:
                cell = int(raw)
            except ValueError:
                logging.error("Not a cell index: %r", raw)
                return 2
            reply = session.advance(cell)
        first = False
        if reply is not None:
            print(reply, flush=True)
        if session.finished:
            logging.info("game over winner=%d board=%s", session.winner,
                         ''.join(map(str, session.board)))
            break
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("naughts"))
        except Exception:
            print("unknown")
        return 0

    try:
        cfg = config_from_env()
        logging.debug("config use_book=%s tie_break=%s", cfg.use_book, cfg.tie_break)

        if ns.cmd == "lookup":
            b = _parse_board(ns.board)
            move = MoveOracle().lookup(b)
            logging.info("board=%s move=%d", ns.board.strip(), move)
            print(move)
            return 0

        if ns.cmd == "play":
            return _play(GameSession.create())
    except (OracleError, ValueError) as exc:
        logging.error("%s", exc)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
