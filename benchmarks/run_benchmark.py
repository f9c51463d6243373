"""
CLI entry point for running ready pool benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # all pools, 1000 jobs
    python -m benchmarks.run_benchmark --ready-pool linear      # single pool
    python -m benchmarks.run_benchmark --num-jobs 5000          # more jobs
    python -m benchmarks.run_benchmark --max-wait-time 10 --seed 7
"""

import argparse
import json

from benchmarks.throughput import PoolBenchmark
from models.enums import ReadyPoolKind


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ready Pool Throughput Benchmark")
    parser.add_argument(
        "--num-jobs", type=int, default=1000,
        help="Number of jobs to simulate (default: 1000)",
    )
    parser.add_argument(
        "--ready-pool", type=str, default="all",
        choices=[kind.value for kind in ReadyPoolKind] + ["all"],
        help="Which ready pool to benchmark (default: all)",
    )
    parser.add_argument("--seed", type=int, default=42, help="Workload seed (default: 42)")
    parser.add_argument(
        "--max-wait-time", type=int, default=None,
        help="Aging threshold (default: from settings)",
    )
    args = parser.parse_args(argv)

    print(f"=== Ready Pool Throughput Benchmark ===")
    print(f"Jobs: {args.num_jobs} | Pool: {args.ready_pool}\n")

    bench = PoolBenchmark(num_jobs=args.num_jobs, seed=args.seed, max_wait_time=args.max_wait_time)

    if args.ready_pool == "all":
        results = bench.run_all_pools()
    else:
        results = [bench.run(args.ready_pool)]

    print("\n=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<10} {:>10} {:>15} {:>12}".format("Pool", "Time (s)", "Throughput", "Avg wait"))
    print("-" * 50)
    for r in results:
        print("{:<10} {:>10.4f} {:>12.0f} j/s {:>12.3f}".format(
            r["ready_pool"], r["wall_clock_sec"], r["throughput_jobs_per_sec"] or 0,
            r["average_wait_time"],
        ))
    return results


if __name__ == "__main__":
    main()
