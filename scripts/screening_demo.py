#!/usr/bin/env python
"""ESAS screening walkthrough.

Runs the screening engine on reference scenarios (or on answers passed as
JSON) and prints the triage result and storage record.

Usage:
    python scripts/screening_demo.py tie        # Breathing and pain tied at 2
    python scripts/screening_demo.py zero       # No complaints at all
    python scripts/screening_demo.py severe     # Severe pain only
    python scripts/screening_demo.py all
    python scripts/screening_demo.py custom --answers '{"1": 3, "2": 0, ...}'
"""

import argparse
import json
import sys
from typing import Any

from esas_triage.rules.engine import process_esas_screening
from esas_triage.scoring.esas import ESASValidationError
from esas_triage.services.screening_record import format_screening_record

SCENARIOS: dict[str, dict[str, int]] = {
    "tie": {**{str(i): 0 for i in range(1, 10)}, "1": 2, "6": 2},
    "zero": {str(i): 0 for i in range(1, 10)},
    "severe": {**{str(i): 0 for i in range(1, 10)}, "1": 9},
}


def run(name: str, answers: dict[str, Any]) -> bool:
    """Screen one set of answers and print the outcome."""
    print(f"=== {name} ===")
    try:
        result = process_esas_screening(answers)
    except ESASValidationError as e:
        print(json.dumps({"errors": e.errors}, indent=2, ensure_ascii=False))
        return False

    record = format_screening_record(result)
    print(
        json.dumps(
            {"result": result.to_dict(), "record": record.model_dump(mode="json")},
            indent=2,
            ensure_ascii=False,
        )
    )
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="ESAS Screening Walkthrough")
    parser.add_argument(
        "scenario",
        choices=[*SCENARIOS, "all", "custom"],
        help="Which scenario to run",
    )
    parser.add_argument(
        "--answers",
        type=json.loads,
        help="JSON object of item scores (custom scenario only)",
    )

    args = parser.parse_args()

    if args.scenario == "custom":
        if args.answers is None:
            parser.error("custom scenario requires --answers")
        return 0 if run("custom", args.answers) else 1

    names = list(SCENARIOS) if args.scenario == "all" else [args.scenario]
    ok = all([run(name, SCENARIOS[name]) for name in names])
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
