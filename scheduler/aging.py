"""
Aging: starvation avoidance for the priority ready pool.

A pure priority scheduler can starve a low-priority job forever if better
jobs keep arriving. Aging fixes that: after every job completion, each job
still waiting whose wait so far exceeds max_wait_time gets its priority
number lowered by exactly 1. A job that keeps waiting keeps improving, one
step per pass, with no floor.

The pass has two phases:
1. Scan a snapshot of the pool, best key first, and mutate the qualifying jobs.
2. Re-insert each mutated job so the pool re-sequences it.

Phase 2 is what makes the new priority visible: the pool captured each
job's key when it was inserted, and never looks at job.priority again
until the job goes back in.
"""

import logging
from dataclasses import dataclass

from scheduler.base import AbstractReadyPool, ordering_key
from scheduler.trace import TraceSink

logger = logging.getLogger(__name__)


@dataclass
class PriorityChange:
    job_id: int
    time: int
    wait_time: int
    old_priority: int
    new_priority: int


class AgingPolicy:

    def __init__(self, max_wait_time: int):
        if max_wait_time < 0:
            raise ValueError(f"max_wait_time must be >= 0, got {max_wait_time}")
        self.max_wait_time = max_wait_time

    def apply(
        self, pool: AbstractReadyPool, current_time: int, trace: TraceSink
    ) -> list[PriorityChange]:
        trace("Update priority:")

        changes: list[PriorityChange] = []
        aged = []
        for job in sorted(pool, key=ordering_key):
            current_wait = current_time - job.arrival_time
            if current_wait <= self.max_wait_time:
                continue

            trace(
                f"Job {job.job_id}, wait time = {current_wait}, "
                f"current priority = {job.priority}"
            )
            old_priority = job.priority
            job.priority -= 1
            trace(f"Job {job.job_id}, new priority = {job.priority}")

            aged.append(job)
            changes.append(PriorityChange(
                job_id=job.job_id,
                time=current_time,
                wait_time=current_wait,
                old_priority=old_priority,
                new_priority=job.priority,
            ))

        for job in aged:
            pool.insert(job)

        if aged:
            logger.debug(f"Aged {len(aged)} job(s) at time {current_time}")
        return changes
