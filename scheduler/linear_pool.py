"""
Linear ready pool: a plain array-backed min-heap.

Data structure: heapq over a list of tuples
- insert:       heappush                          → O(log n)
- extract_best: heappop                           → O(log n)
- remove:       scan for the job + heapify        → O(n)

The heap stores tuples: (priority, arrival_time, job_id, sequence, job)
- the first three fields are the ordering key, snapshotted at insert time
- sequence: tiebreaker, unique per insert, so Job objects are never compared

Finding a job to replace it costs a linear scan by identity. Aging passes
only run after a job finishes, so this cost is paid rarely compared to
dispatches. IndexedReadyPool avoids it if the pool gets large.
"""

import heapq
from typing import Optional

from models.job import Job
from scheduler.base import AbstractReadyPool, ordering_key


class LinearReadyPool(AbstractReadyPool):

    def __init__(self):
        self._heap: list[tuple[int, int, int, int, Job]] = []
        self._counter: int = 0

    def insert(self, job: Job) -> None:
        self._remove(job)
        heapq.heappush(self._heap, (*ordering_key(job), self._counter, job))
        self._counter += 1

    def extract_best(self) -> Job:
        if not self._heap:
            raise IndexError("extract_best from an empty ready pool")
        return heapq.heappop(self._heap)[-1]

    def peek_best(self) -> Optional[Job]:
        return self._heap[0][-1] if self._heap else None

    def size(self) -> int:
        return len(self._heap)

    def jobs(self) -> list[Job]:
        return [entry[-1] for entry in self._heap]

    def __contains__(self, job: object) -> bool:
        return any(entry[-1] is job for entry in self._heap)

    @property
    def kind(self) -> str:
        return "linear"

    def _remove(self, job: Job) -> None:
        for index, entry in enumerate(self._heap):
            if entry[-1] is job:
                last = self._heap.pop()
                if index < len(self._heap):
                    self._heap[index] = last
                    heapq.heapify(self._heap)
                return
