"""Strategy configuration.

Environment-first: NAUGHTS_USE_BOOK and NAUGHTS_TIE_BREAK override the
defaults when set.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

TIE_BREAKS = ("lowest", "positional")

# centre, then corners, then edges
POSITIONAL_ORDER = (4, 0, 2, 6, 8, 1, 3, 5, 7)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class OracleConfig:
    use_book: bool = True
    tie_break: str = "lowest"  # one of: "lowest", "positional"

    def __post_init__(self) -> None:
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(
                f"Unknown tie_break {self.tie_break!r}; expected one of {', '.join(TIE_BREAKS)}"
            )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def config_from_env() -> OracleConfig:
    tie_break = os.getenv("NAUGHTS_TIE_BREAK")
    return OracleConfig(
        use_book=_env_flag("NAUGHTS_USE_BOOK", True),
        tie_break=tie_break.strip().lower() if tie_break else "lowest",
    )


def pick_tie_break(moves, tie_break: str) -> int:
    """Choose one cell out of equally good moves."""
    if not moves:
        raise ValueError("No moves to choose from")
    if tie_break == "positional":
        return min(moves, key=POSITIONAL_ORDER.index)
    return min(moves)
