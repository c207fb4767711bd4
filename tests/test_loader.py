import json

import pandas as pd
import pytest

from src.sudoku.loader import load_puzzles
from src.sudoku.parser import parse_puzzle

from boards import CLASSIC_PUZZLE, SIX_SOLUTION

CLASSIC_LINE = "".join(str(v) for row in CLASSIC_PUZZLE for v in row)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(str(tmp_path / "nope.json"))


def test_json_array_with_nested_grid(tmp_path):
    path = tmp_path / "puzzles.json"
    path.write_text(json.dumps([{"id": "six", "grid": SIX_SOLUTION}, "ignored"]))
    records = load_puzzles(str(path))
    assert len(records) == 1
    assert records[0]["size"] == "6"
    assert parse_puzzle(records[0]) == (SIX_SOLUTION, 6)


def test_json_object_and_jsonl_fallback(tmp_path):
    single = tmp_path / "single.json"
    single.write_text(json.dumps({"id": "classic-9x9", "puzzle": CLASSIC_LINE}))
    assert load_puzzles(str(single))[0]["size"] == "9"

    lines = tmp_path / "lines.json"
    lines.write_text(
        json.dumps({"id": "a", "puzzle": CLASSIC_LINE}) + "\n\nnot json\n"
        + json.dumps({"id": "b", "board": SIX_SOLUTION}) + "\n"
    )
    records = load_puzzles(str(lines))
    assert [r["id"] for r in records] == ["a", "b"]
    assert records[1]["puzzle"] == SIX_SOLUTION


def test_jsonl_keeps_explicit_size(tmp_path):
    path = tmp_path / "puzzles.jsonl"
    path.write_text(json.dumps({"id": "x", "size": 9, "puzzle": CLASSIC_LINE}) + "\n")
    assert load_puzzles(str(path))[0]["size"] == 9


def test_csv_keeps_leading_zeros(tmp_path):
    path = tmp_path / "puzzles.csv"
    grid = "0" * 35 + "1"
    pd.DataFrame([{"id": "z", "puzzle": grid}]).to_csv(path, index=False)
    records = load_puzzles(str(path))
    assert records[0]["puzzle"] == grid
    assert records[0]["size"] == "6"


def test_parquet_nested_grid(tmp_path):
    path = tmp_path / "puzzles.parquet"
    pd.DataFrame([{"id": "six", "grid": SIX_SOLUTION}]).to_parquet(path)
    records = load_puzzles(str(path))
    assert records[0]["size"] == "6"
    assert parse_puzzle(records[0]) == (SIX_SOLUTION, 6)
