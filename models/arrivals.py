"""
Arrival sequence: every job of a run, in arrival order.

The engine consumes it from the front as the clock reaches each job's
arrival time, so it drains to empty during a run. original_count is
captured up front because the average wait time divides by it.

Data structure: collections.deque
- peek: index 0      → O(1)
- pop:  popleft      → O(1)

sorted() is stable, so jobs with the same arrival time keep the order
they had in the input.
"""

from collections import deque
from typing import Iterable, Iterator, Optional

from models.job import Job


class ArrivalSequence:

    def __init__(self, jobs: Iterable[Job]):
        ordered = sorted(jobs, key=lambda job: job.arrival_time)
        self._queue: deque[Job] = deque(ordered)
        self.original_count: int = len(ordered)

    def peek(self) -> Optional[Job]:
        return self._queue[0] if self._queue else None

    def pop(self) -> Job:
        """Remove and return the earliest-arriving job. Raises IndexError if empty."""
        if not self._queue:
            raise IndexError("pop from an empty arrival sequence")
        return self._queue.popleft()

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._queue)

    def __str__(self) -> str:
        return "\n".join(
            f"Id = {job.job_id}, priority = {job.priority}, "
            f"duration = {job.duration}, arrival = {job.arrival_time}"
            for job in self._queue
        )
