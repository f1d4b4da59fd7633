#!/usr/bin/env python3
"""Benchmark script for demofilter performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

AGE_GROUPS = ("18-24", "25-34", "35-44", "45-54", "55+")
GENDERS = ("Female", "Male", "Non-binary", "Female, Non-binary")


def benchmark_import_time() -> float:
    """Measure import time of demofilter package."""
    start = time.perf_counter()
    import demofilter  # noqa: F401

    return time.perf_counter() - start


def make_candidates(count: int) -> list[dict[str, object]]:
    """Synthetic candidate profiles cycling through known values."""
    return [
        {
            "id": f"u{i}",
            "age_group": AGE_GROUPS[i % len(AGE_GROUPS)],
            "gender": GENDERS[i % len(GENDERS)],
            "education": "Bachelor's degree" if i % 3 else None,
        }
        for i in range(count)
    ]


def benchmark_filter(count: int) -> float:
    """Measure filtering count candidates against a three-group selection."""
    from demofilter.application.services.matcher import DemographicMatcher
    from demofilter.domain.model.option import DemographicOption

    selections = [
        DemographicOption(category="options", value="18-24", group="age_group"),
        DemographicOption(category="options", value="25-34", group="age_group"),
        DemographicOption(category="options", value="Non-binary", group="gender"),
        DemographicOption(category="options", value="bachelor", group="education"),
    ]
    candidates = make_candidates(count)
    matcher = DemographicMatcher()

    start = time.perf_counter()
    matcher.filter(candidates, selections)
    return time.perf_counter() - start


def benchmark_toggle() -> float:
    """Measure toggling selections on and off."""
    from demofilter.application.selection_store import SelectionStore

    store = SelectionStore(max_selections=50)
    start = time.perf_counter()
    for i in range(10000):
        store.toggle("options", AGE_GROUPS[i % len(AGE_GROUPS)], "age_group")
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run demofilter benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--candidates",
        type=int,
        default=100000,
        help="Number of synthetic candidates to filter",
    )
    args = parser.parse_args()

    results = []

    # Import time
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        }
    )

    # Candidate filtering
    results.append(
        {
            "name": f"Filter ({args.candidates} candidates)",
            "unit": "seconds",
            "value": benchmark_filter(args.candidates),
        }
    )

    # Store toggles
    results.append(
        {
            "name": "Toggle (10k iterations)",
            "unit": "seconds",
            "value": benchmark_toggle(),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
