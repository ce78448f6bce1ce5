#!/usr/bin/env python3
"""Benchmark script for paramcheck validation throughput.

Compares the passing path, failures with stack capture, and fast failures.
Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

ITERATIONS = 10000


def benchmark_import_time() -> float:
    """Measure import time of paramcheck package."""
    start = time.perf_counter()
    import paramcheck  # noqa: F401

    return time.perf_counter() - start


def benchmark_passing_checks() -> float:
    """Measure a passing chain: no messages are built."""
    from paramcheck import ParamCheck

    start = time.perf_counter()
    for i in range(ITERATIONS):
        (
            ParamCheck.require()
            .not_blank("alice", "username")
            .in_range(i % 100, 0, 100, "age")
            .matches("alice@example.org", r"[^@]+@[^@]+", "email")
        )
    return time.perf_counter() - start


def benchmark_failures(*, fast: bool) -> float:
    """Measure raising and catching one failure per iteration."""
    from paramcheck import SafeParamCheck, ValidationFailedError

    make = SafeParamCheck.require_fast if fast else SafeParamCheck.require
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        try:
            make().is_positive(-1, "amount")
        except ValidationFailedError:
            pass
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run paramcheck benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {
            "name": f"Passing Checks ({ITERATIONS // 1000}k iterations)",
            "unit": "seconds",
            "value": benchmark_passing_checks(),
        },
        {
            "name": f"Failures With Stack ({ITERATIONS // 1000}k iterations)",
            "unit": "seconds",
            "value": benchmark_failures(fast=False),
        },
        {
            "name": f"Fast Failures ({ITERATIONS // 1000}k iterations)",
            "unit": "seconds",
            "value": benchmark_failures(fast=True),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
