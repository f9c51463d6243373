"""
Indexed ready pool: min-heap plus an identity-keyed entry map.

Data structure: heapq + dict[Job, entry]
- insert:       heappush            → O(log n)
- extract_best: heappop (+ skips)   → O(log n) amortized
- remove:       mark entry dead     → O(1)

Each heap entry is a list:

    [priority, arrival_time, job_id, sequence, job]

The sequence number is unique, so heapq never has to compare two Job
objects. Removing a job does not touch the heap: its entry's job slot is
set to None and the entry is dropped from the map. Dead entries are
discarded when they surface at the top of the heap, and the heap is rebuilt
from the live entries once dead ones outnumber them. Aged jobs re-insert
with a better key, so their stale entries sink and would otherwise stay.

This is the "indexed heap" alternative to the linear pool's O(n) scan.
"""

import heapq
from typing import Optional

from models.job import Job
from scheduler.base import AbstractReadyPool, ordering_key

_JOB = -1  # index of the job slot inside a heap entry


class IndexedReadyPool(AbstractReadyPool):

    def __init__(self):
        self._heap: list[list] = []
        self._entries: dict[Job, list] = {}
        self._counter: int = 0
        self._dead: int = 0

    def insert(self, job: Job) -> None:
        if job in self._entries:
            self._discard(job)
        entry = [*ordering_key(job), self._counter, job]
        self._counter += 1
        self._entries[job] = entry
        heapq.heappush(self._heap, entry)
        if self._dead > len(self._entries):
            self._compact()

    def extract_best(self) -> Job:
        self._drop_dead_entries()
        if not self._heap:
            raise IndexError("extract_best from an empty ready pool")
        job = heapq.heappop(self._heap)[_JOB]
        del self._entries[job]
        return job

    def peek_best(self) -> Optional[Job]:
        self._drop_dead_entries()
        return self._heap[0][_JOB] if self._heap else None

    def size(self) -> int:
        return len(self._entries)

    def jobs(self) -> list[Job]:
        return list(self._entries)

    def __contains__(self, job: object) -> bool:
        return job in self._entries

    @property
    def kind(self) -> str:
        return "indexed"

    def _discard(self, job: Job) -> None:
        entry = self._entries.pop(job)
        entry[_JOB] = None
        self._dead += 1

    def _drop_dead_entries(self) -> None:
        while self._heap and self._heap[0][_JOB] is None:
            heapq.heappop(self._heap)
            self._dead -= 1

    def _compact(self) -> None:
        self._heap = list(self._entries.values())
        heapq.heapify(self._heap)
        self._dead = 0
