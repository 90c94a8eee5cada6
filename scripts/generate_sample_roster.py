#!/usr/bin/env python3
"""Generate random roster files for manual validation.

This script writes export-format roster files (``roster_<n>.json``) to the
local/ folder, plus the built-in sample roster. The files can be fed to
``enroll-advisor recommend`` / ``enroll-advisor weekly``.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from enroll_advisor.api import EXPORT_VERSION
from enroll_advisor.generators import RosterGenerator
from enroll_advisor.scenarios import sample_payload
from enroll_advisor.sinks.serialization import school_to_dict, state_to_dict


def to_export(roster) -> dict:
    """Merge each school's terms and state into one export record."""
    records = []
    for state in roster:
        record = school_to_dict(state.school)
        record.update({k: v for k, v in state_to_dict(state).items() if k != "schoolId"})
        records.append(record)
    return {"version": EXPORT_VERSION, "schools": records}


def save_json(data: dict, filename: str, output_dir: Path) -> None:
    """Save data to JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"Saved {len(data['schools'])} schools to {filepath}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random roster files")
    parser.add_argument("--count", type=int, default=5, help="Number of rosters")
    parser.add_argument("--schools", type=int, default=4, help="Schools per roster")
    parser.add_argument("--today", type=int, default=25, help="Day the states are valid for")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--output-dir", type=Path, default=project_root / "local")
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)

    print("\n1. Writing sample roster...")
    save_json(sample_payload(), "sample_roster.json", args.output_dir)

    print(f"\n2. Generating {args.count} random rosters (day {args.today})...")
    generator = RosterGenerator(seed=args.seed)
    for n, roster in enumerate(generator.generate_batch(args.count, args.schools, args.today), start=1):
        save_json(to_export(roster), f"roster_{n}.json", args.output_dir)


if __name__ == "__main__":
    main()
