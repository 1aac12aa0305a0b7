from pathlib import Path

import pytest

from grid_combat.cli import main
from tests.test_utils import EXAMPLE_BATTLES


@pytest.fixture
def map_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_BATTLES[0][0], encoding="utf-8")
    return path


def test_prints_outcome(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(map_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "winner: goblin" in out
    assert "rounds: 47" in out
    assert "outcome: 27730" in out


def test_show_map(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(map_file), "--show-map"]) == 0
    assert "#.#.#G#   G(59)" in capsys.readouterr().out


def test_calibrate(map_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(map_file), "--calibrate"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "attack power: 15" in out
    assert "outcome: 4988" in out


def test_malformed_map_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("#E?G#\n", encoding="utf-8")
    assert main([str(path)]) == 1


def test_missing_file_exits_with_error(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.txt")]) == 1


def test_round_limit(map_file: Path) -> None:
    assert main([str(map_file), "--max-rounds", "5"]) == 1
