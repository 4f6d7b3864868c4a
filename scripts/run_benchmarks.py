#!/usr/bin/env python3
# ABOUTME: Script to run registry benchmark tests with detailed reporting
# ABOUTME: Uses pytest-benchmark for accurate performance measurements

import subprocess
import sys
import argparse
from pathlib import Path
from typing import Optional


def run_benchmarks(
    save_baseline: bool = False,
    compare_baseline: Optional[str] = None,
    output_format: str = "table",
) -> int:
    """Run benchmark tests with the requested reporting options."""

    print("🚀 Starting Registry Benchmark Suite")
    print("=" * 50)

    project_root = Path(__file__).parent.parent

    cmd = [sys.executable, "-m", "pytest", "src/flyweight/tests/benchmark/", "-v", "-m", "benchmark"]

    if save_baseline:
        cmd.append("--benchmark-save=baseline")
        print("💾 Saving benchmark results as baseline")

    if compare_baseline:
        cmd.append(f"--benchmark-compare={compare_baseline}")
        print(f"📊 Comparing against baseline: {compare_baseline}")

    if output_format == "json":
        cmd.append("--benchmark-json=benchmark_results.json")
    elif output_format == "histogram":
        cmd.append("--benchmark-histogram=benchmark_histogram")

    cmd.extend(["--benchmark-min-rounds=5", "--benchmark-max-time=2.0", "--benchmark-sort=mean"])

    print(f"🔧 Running command: {' '.join(cmd)}")
    print("-" * 50)

    result = subprocess.run(cmd, cwd=project_root, text=True)

    if result.returncode != 0:
        print("\n❌ Benchmark tests failed!")
        return result.returncode

    print("\n✅ Benchmark tests completed successfully!")
    if output_format == "json":
        print("📄 Results saved to benchmark_results.json")
    elif output_format == "histogram":
        print("📈 Histogram saved to benchmark_histogram.svg")
    return 0


def main() -> int:
    """Main function with command line argument parsing."""
    parser = argparse.ArgumentParser(description="Run benchmark tests for flyweight-registry")

    parser.add_argument(
        "--save-baseline",
        action="store_true",
        help="Save benchmark results as baseline for future comparisons",
    )
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare against a saved baseline (e.g., 'baseline')",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json", "histogram"],
        default="table",
        help="Output format for benchmark results",
    )

    args = parser.parse_args()

    return run_benchmarks(
        save_baseline=args.save_baseline,
        compare_baseline=args.compare,
        output_format=args.format,
    )


if __name__ == "__main__":
    sys.exit(main())
