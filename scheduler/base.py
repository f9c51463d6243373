"""
Abstract base class for the ready pool (Strategy pattern).

The SchedulerEngine only knows about AbstractReadyPool: it calls insert()
and extract_best() without caring how the pool keeps its ordering.

The hard part of this contract is that a job's priority can change while
the job is sitting in the pool. Heap-backed structures compare keys only
when an element goes in, so a mutated priority is invisible until the job
is removed and inserted again. insert() therefore doubles as "re-sequence":
inserting a job that is already present replaces its stale entry.

Ordering key, shared by every implementation:

    (priority, arrival_time, job_id, insertion sequence)

Lower sorts first. The insertion sequence only matters for jobs that agree
on the first three fields (duplicate ids arriving on the same tick), and it
keeps every pool deterministic.

To add a new pool structure:
1. Create a class that inherits AbstractReadyPool
2. Implement the abstract methods
3. Register it in scheduler/registry.py
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from models.job import Job


class SchedulerInvariantError(AssertionError):
    """The engine broke one of its own loop invariants. Always a bug, never retried."""


def ordering_key(job: Job) -> tuple[int, int, int]:
    return (job.priority, job.arrival_time, job.job_id)


class AbstractReadyPool(ABC):
    """
    Interface that all ready pool structures implement.

    - insert: add a job, replacing its stale entry if already present
    - extract_best: remove and return the best job (IndexError if empty)
    - peek_best: look at the best job without removing it
    - size: how many distinct jobs are waiting
    - iteration: a snapshot of the waiting jobs, safe to mutate while scanning
    """

    @abstractmethod
    def insert(self, job: Job) -> None:
        """Add a job, or re-sequence it if it is already in the pool."""
        ...

    @abstractmethod
    def extract_best(self) -> Job:
        """Remove and return the lowest-key job. Raises IndexError if empty."""
        ...

    @abstractmethod
    def peek_best(self) -> Optional[Job]:
        """View the best job without removing it. Returns None if empty."""
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def jobs(self) -> list[Job]:
        """A fresh list of the waiting jobs, in no particular order."""
        ...

    @abstractmethod
    def __contains__(self, job: object) -> bool:
        ...

    @property
    @abstractmethod
    def kind(self) -> str:
        """Unique name for this structure (e.g., 'indexed', 'linear')."""
        ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Job]:
        return iter(self.jobs())
