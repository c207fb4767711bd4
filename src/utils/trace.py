"""Tracing module: records solver and generator steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


def cell_label(row: int, col: int) -> str:
    return f"r{row}c{col}"


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'backtrack', 'solution_found', 'no_solution', 'conflict_scan', 'cells_cleared'
    cell: Optional[str] = None
    value: Optional[int] = None
    candidates: Optional[int] = None  # Candidate values tried at this cell
    filled: Optional[int] = None  # Non-empty cells on the working board
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_assign(self, row: int, col: int, value: int, candidates: int, filled: int):
        """Log a value placed on the working board."""
        if not self.enabled:
            return
        self._record('assign', cell=cell_label(row, col), value=value, candidates=candidates, filled=filled)

    def log_backtrack(self, row: int, col: int, reason: str = "No valid values"):
        """Log a cell being reset after every candidate failed below it."""
        if not self.enabled:
            return
        self._record('backtrack', cell=cell_label(row, col), reason=reason)

    def log_solution_found(self, filled: int):
        if not self.enabled:
            return
        self._record('solution_found', filled=filled)

    def log_no_solution(self, filled: int):
        if not self.enabled:
            return
        self._record('no_solution', filled=filled, reason="Search space exhausted")

    def log_conflict_scan(self, conflicts: int):
        if not self.enabled:
            return
        self._record('conflict_scan', reason=f"{conflicts} conflicting cells")

    def log_cells_cleared(self, cleared: int, clues: int):
        """Log the clue-removal pass of puzzle generation."""
        if not self.enabled:
            return
        self._record('cells_cleared', filled=clues, reason=f"Cleared {cleared} cells")

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'cell', 'value',
            'candidates', 'filled', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_assignments': action_counts.get('assign', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
