import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    env.pop("NAUGHTS_USE_BOOK", None)
    env.pop("NAUGHTS_TIE_BREAK", None)
    exe = [sys.executable, "-m", "naughts.cli"]
    return subprocess.run(exe + args, cwd=cwd, input=stdin, capture_output=True, text=True, env=env)


def test_cli_lookup(tmp_path: Path):
    r = _run_cli(["lookup", "--board", "120200100"], cwd=tmp_path)
    assert r.returncode == 0
    assert r.stdout.strip() == "8"
    assert "move=8" in r.stderr


def test_cli_play_documented_line(tmp_path: Path):
    r = _run_cli(["play"], cwd=tmp_path, stdin="\n1\n3\n4\n")
    assert r.returncode == 0
    assert r.stdout.split() == ["0", "6", "8", "7"]
    assert "winner=1" in r.stderr


def test_cli_play_rejects_occupied_cell(tmp_path: Path):
    r = _run_cli(["play"], cwd=tmp_path, stdin="\n0\n")
    assert r.returncode == 2
    assert "already occupied" in r.stderr


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x", "111222111"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    r = _run_cli(["lookup", "--board", bad], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_lookup_miss(tmp_path: Path):
    # finished game: nothing to answer
    r = _run_cli(["lookup", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 2
    assert "No known response" in r.stderr
