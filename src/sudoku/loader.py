import json
import os
import re
from typing import Any, Dict, List, Optional

import pandas as pd

from .parser import grid_cells

_GRID_KEYS = ("grid", "puzzle", "board")
_SIZE_BY_CELLS = {36: "6", 81: "9"}


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .json, .jsonl, .csv and .parquet formats.
    Returns a list of raw puzzle dictionaries.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _coerce_jsonable(value: Any) -> Any:
        # pandas hands back numpy arrays for nested list columns.
        if hasattr(value, "tolist"):
            value = value.tolist()
        if isinstance(value, (list, tuple)):
            return [_coerce_jsonable(v) for v in value]
        return value

    def _infer_size(value: Any) -> Optional[str]:
        if _is_nonempty_str(value):
            match = re.search(r"(\d+)x\1", value)
            if match and match.group(1) in ("6", "9"):
                return match.group(1)
        return None

    def _infer_size_from_cells(grid: Any) -> Optional[str]:
        if isinstance(grid, str):
            cells = grid_cells(grid)
            return _SIZE_BY_CELLS.get(len(cells))
        if isinstance(grid, list) and grid and isinstance(grid[0], list):
            return _SIZE_BY_CELLS.get(sum(len(row) for row in grid))
        return None

    def _normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
        record = {k: _coerce_jsonable(v) for k, v in record.items()}
        for key in _GRID_KEYS:
            value = record.get(key)
            if value is not None and value != "":
                record["puzzle"] = value
                break

        size_value = record.get("size")
        if size_value is None or size_value == "" or (isinstance(size_value, float) and pd.isna(size_value)):
            inferred = _infer_size(record.get("id")) or _infer_size_from_cells(record.get("puzzle"))
            if inferred:
                record["size"] = inferred
            else:
                record.pop("size", None)

        return record

    def _read_lines(handle) -> List[Dict[str, Any]]:
        data = []
        for line in handle:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(obj, dict):
                data.append(_normalize_record(obj))
        return data

    # Case 1: Tabular files (Parquet / CSV)
    if file_path.endswith((".parquet", ".csv")):
        try:
            if file_path.endswith(".parquet"):
                df = pd.read_parquet(file_path)
            else:
                # Keep grids such as "003020600..." as text so leading zeros survive.
                df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
            records = df.to_dict(orient="records")
            return [_normalize_record(r) for r in records]
        except Exception as e:
            print(f"Error reading {file_path}: {e}")
            return []

    # Case 2: JSON File (array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                return [_normalize_record(p) for p in payload if isinstance(p, dict)]
            if isinstance(payload, dict):
                return [_normalize_record(payload)]
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            with open(file_path, "r", encoding="utf-8") as f:
                return _read_lines(f)

    # Case 3: JSONL File
    with open(file_path, "r", encoding="utf-8") as f:
        return _read_lines(f)
