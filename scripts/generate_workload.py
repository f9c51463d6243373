"""
Workload script: writes a random workload file for the simulator.

Usage:
    python -m scripts.generate_workload                       # 20 jobs → process_scheduling_input.txt
    python -m scripts.generate_workload --count 200 --seed 7 --output big.txt

Then run it:
    python -m cli.simulate big.txt big_trace.txt
"""

import argparse
from typing import Optional, Sequence

from config.settings import settings
from jobs.generator import generate_jobs
from jobs.loader import dump_jobs


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a random simulator workload")
    parser.add_argument("--count", type=int, default=20, help="Number of jobs (default: 20)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible file")
    parser.add_argument("--max-priority", type=int, default=10)
    parser.add_argument("--max-duration", type=int, default=20)
    parser.add_argument("--arrival-span", type=int, default=100)
    parser.add_argument(
        "--output", type=str, default=settings.INPUT_FILE,
        help=f"File to write (default: {settings.INPUT_FILE})",
    )
    args = parser.parse_args(argv)

    jobs = generate_jobs(
        args.count,
        seed=args.seed,
        max_priority=args.max_priority,
        max_duration=args.max_duration,
        arrival_span=args.arrival_span,
    )
    dump_jobs(jobs, args.output)
    print(f"Wrote {len(jobs)} jobs to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
