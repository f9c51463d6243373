"""
Command-line entry point: simulate a workload file.

Usage:
    python -m cli.simulate                                   # default input/output files
    python -m cli.simulate jobs.txt trace.txt                # explicit files
    python -m cli.simulate jobs.txt trace.txt --max-wait-time 10
    python -m cli.simulate jobs.txt trace.txt --ready-pool linear

The job table, the full trace and the two summary lines go to the output
file and to stdout. Exit code 1 means the input could not be read or parsed,
or the output file could not be opened.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from config.settings import settings
from jobs.loader import WorkloadFormatError, load_jobs
from models.arrivals import ArrivalSequence
from models.enums import ReadyPoolKind
from scheduler.engine import SchedulerEngine
from scheduler.trace import FileTraceSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Non-preemptive priority scheduling simulator with aging",
    )
    parser.add_argument(
        "input", nargs="?", default=settings.INPUT_FILE,
        help=f"Workload file, one 'id priority duration arrival' per line (default: {settings.INPUT_FILE})",
    )
    parser.add_argument(
        "output", nargs="?", default=settings.OUTPUT_FILE,
        help=f"Where to write the trace (default: {settings.OUTPUT_FILE})",
    )
    parser.add_argument(
        "--max-wait-time", type=int, default=settings.MAX_WAIT_TIME,
        help=f"Wait after which a job's priority is improved (default: {settings.MAX_WAIT_TIME})",
    )
    parser.add_argument(
        "--ready-pool", type=str, default=settings.READY_POOL.value,
        choices=[kind.value for kind in ReadyPoolKind],
        help=f"Ready pool structure (default: {settings.READY_POOL.value})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.max_wait_time < 0:
        logger.error(f"--max-wait-time must be >= 0, got {args.max_wait_time}")
        return 1

    try:
        jobs = load_jobs(args.input)
    except (OSError, WorkloadFormatError) as e:
        logger.error(f"Cannot load workload: {e}")
        return 1

    # Engine before sink: a rejected option must leave the output file untouched
    arrivals = ArrivalSequence(jobs)
    sink = FileTraceSink(args.output, echo=sys.stdout)
    engine = SchedulerEngine(
        arrivals,
        max_wait_time=args.max_wait_time,
        trace=sink,
        ready_pool=args.ready_pool,
    )

    try:
        sink.open()
    except OSError as e:
        logger.error(f"Cannot write trace: {e}")
        return 1

    try:
        sink(str(arrivals))
        result = engine.simulate()
        sink(f"Total wait time = {result.total_wait_time}")
        sink(f"Average wait time = {result.average_wait_time:.2f}")
    finally:
        sink.close()

    logger.info(f"Trace written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
