"""CLI entrypoint: load puzzle(s), run solver or generator, and report results."""

import argparse
import csv
import json
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from solver import solve_puzzle
from src.sudoku.generator import generate
from src.sudoku.loader import load_puzzles
from src.sudoku.model import Difficulty, SolveResult, count_clues
from src.sudoku.parser import format_board, parse_puzzle
from src.sudoku.rules import validate_board
from src.utils.io import save_json
from src.utils.trace import get_tracer, reset_tracer

PUZZLE_SUFFIXES = [".json", ".jsonl", ".parquet", ".csv"]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve, check, or generate 6x6 and 9x9 sudoku puzzles")
    commands = parser.add_subparsers(dest="command", required=True)

    solve_cmd = commands.add_parser("solve", help="Solve every puzzle in a file or directory")
    solve_cmd.add_argument("input", type=Path, help="Path to puzzle file or directory of puzzles")
    solve_cmd.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    solve_cmd.add_argument(
        "--trace-dir",
        type=Path,
        default=None,
        help="Optional directory receiving one solver trace CSV per puzzle.",
    )

    check_cmd = commands.add_parser("check", help="Report conflicting cells without solving")
    check_cmd.add_argument("input", type=Path, help="Path to puzzle file or directory of puzzles")

    gen_cmd = commands.add_parser("generate", help="Generate new puzzles")
    gen_cmd.add_argument("--size", type=int, choices=[6, 9], default=9)
    gen_cmd.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
    )
    gen_cmd.add_argument("--count", type=int, default=1, help="Number of puzzles to generate")
    gen_cmd.add_argument("--seed", type=int, default=None, help="Seed for reproducible generation")
    gen_cmd.add_argument("--output", type=Path, default=None, help="Optional path to write puzzles JSON")
    return parser.parse_args(argv)


def collect_puzzles(input_path: Path) -> List[Dict[str, Any]]:
    if input_path.is_file():
        return load_puzzles(str(input_path))
    if input_path.is_dir():
        puzzles = []
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {input_path} is neither file nor directory")


def format_solution(result: SolveResult) -> Dict[str, Any]:
    if result.solved:
        return {"size": result.size, "rows": result.board}
    if result.status == "conflict":
        cells = sorted(result.conflicts)
        return {"size": result.size, "rows": [], "conflicts": [[p.row, p.col] for p in cells]}
    return {"size": result.size, "rows": []}


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "status", "grid_solution", "steps", "duration_ms"])

        for r in results:
            writer.writerow([
                r["id"],
                r["status"],
                json.dumps(r["grid_solution"], ensure_ascii=False, separators=(",", ":")),
                r["steps"],
                "" if r["duration_ms"] is None else f"{r['duration_ms']:.3f}",
            ])


def run_solve(args) -> List[Dict[str, Any]]:
    results = []
    for index, puzzle in enumerate(collect_puzzles(args.input)):
        reset_tracer()
        tracer = get_tracer()
        puzzle_id = str(puzzle.get("id", f"puzzle-{index}"))

        try:
            result = solve_puzzle(puzzle)
            summary = tracer.summary()
            results.append({
                "id": puzzle_id,
                "status": result.status,
                "grid_solution": format_solution(result),
                # Assignments are the search effort; bookkeeping steps are not counted.
                "steps": summary["num_assignments"],
                "duration_ms": result.duration_ms,
            })
            print(f"{puzzle_id}: {result.status} ({summary['num_assignments']} assignments)")
        except (ValueError, TypeError) as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "status": "error",
                "grid_solution": {"size": None, "rows": []},
                "steps": -1,
                "duration_ms": None,
            })

        if args.trace_dir:
            tracer.to_csv(args.trace_dir / f"{puzzle_id}.csv")

    if args.output:
        write_results_csv(results, args.output)
    else:
        print(results)
    return results


def run_check(args) -> Dict[str, List[List[int]]]:
    report = {}
    for index, puzzle in enumerate(collect_puzzles(args.input)):
        puzzle_id = str(puzzle.get("id", f"puzzle-{index}"))
        try:
            board, size = parse_puzzle(puzzle)
        except (ValueError, TypeError) as e:
            print(f"ERROR: Failed to read puzzle {puzzle_id}: {e}")
            continue
        conflicts = sorted(validate_board(board, size))
        report[puzzle_id] = [[p.row, p.col] for p in conflicts]
        if conflicts:
            cells = ", ".join(f"({p.row + 1},{p.col + 1})" for p in conflicts)
            print(f"{puzzle_id}: {len(conflicts)} conflicting cells: {cells}")
        else:
            print(f"{puzzle_id}: OK")
    return report


def run_generate(args) -> List[Dict[str, Any]]:
    rng = random.Random(args.seed)
    records = []
    for i in range(args.count):
        reset_tracer()
        tracer = get_tracer()
        board = generate(args.size, args.difficulty, rng=rng, tracer=tracer)
        puzzle_id = f"generated-{args.size}x{args.size}-{args.difficulty.lower()}-{i + 1}"
        records.append({
            "id": puzzle_id,
            "size": args.size,
            "difficulty": args.difficulty,
            "puzzle": board,
        })
        print(f"{puzzle_id} ({count_clues(board)} clues, {tracer.summary()['num_assignments']} assignments)")
        print(format_board(board))
        print()

    if args.output:
        save_json(args.output, records)
        print(f"Wrote {len(records)} puzzles to {args.output}")
    return records


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    if args.command == "solve":
        return run_solve(args)
    if args.command == "check":
        return run_check(args)
    return run_generate(args)


if __name__ == "__main__":
    main()
