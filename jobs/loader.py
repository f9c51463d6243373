"""
Workload files: one job per line, four integers:

    id priority duration arrival

For example:

    1 4 25 0
    2 3 15 3
    3 1 17 6

Blank lines are ignored. Anything else that is not exactly four integers,
or that has a non-positive duration or a negative arrival time, is
rejected with the file name and line number so the user can fix it.
The scheduler itself assumes well-formed jobs; this is where they get checked.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from models.job import Job

logger = logging.getLogger(__name__)

FIELDS = ("id", "priority", "duration", "arrival")


class WorkloadFormatError(ValueError):
    """A workload line could not be turned into a Job."""

    def __init__(self, source: str, line_number: int, reason: str):
        self.source = source
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{source}, line {line_number}: {reason}")


def parse_job_line(line: str, line_number: int = 1, source: str = "<input>") -> Job:
    parts = line.split()
    if len(parts) != len(FIELDS):
        raise WorkloadFormatError(
            source, line_number,
            f"expected {len(FIELDS)} fields ({' '.join(FIELDS)}), got {len(parts)}",
        )

    try:
        job_id, priority, duration, arrival = (int(p) for p in parts)
    except ValueError:
        raise WorkloadFormatError(source, line_number, f"non-integer field in {line.strip()!r}") from None

    if duration <= 0:
        raise WorkloadFormatError(source, line_number, f"duration must be positive, got {duration}")
    if arrival < 0:
        raise WorkloadFormatError(source, line_number, f"arrival must be >= 0, got {arrival}")

    return Job(job_id=job_id, priority=priority, duration=duration, arrival_time=arrival)


def parse_jobs(lines: Iterable[str], source: str = "<input>") -> list[Job]:
    jobs = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        jobs.append(parse_job_line(line, line_number, source))
    return jobs


def load_jobs(path: Union[str, Path]) -> list[Job]:
    """Read a workload file. Raises OSError if unreadable, WorkloadFormatError if malformed."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        jobs = parse_jobs(f, source=str(path))
    logger.info(f"Loaded {len(jobs)} jobs from {path}")
    return jobs


def format_job(job: Job) -> str:
    return f"{job.job_id} {job.priority} {job.duration} {job.arrival_time}"


def dump_jobs(jobs: Iterable[Job], path: Union[str, Path]) -> None:
    """Write jobs in the same format load_jobs reads."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        for job in jobs:
            f.write(format_job(job) + "\n")
