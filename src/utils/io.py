"""I/O helpers for generated puzzles and solve results."""

import json
from pathlib import Path
from typing import Any


def save_json(path: Path, payload: Any) -> None:
    """Write `payload` as indented UTF-8 JSON, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
        f.write("\n")
