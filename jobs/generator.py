"""
Random workload generator.

Produces jobs with ids 1..count, priorities in [1, max_priority],
durations in [1, max_duration] and arrivals in [0, arrival_span].
Pass a seed to get the same workload every time (benchmarks and tests do).
"""

import random
from typing import Optional

from models.job import Job


def generate_jobs(
    count: int,
    seed: Optional[int] = None,
    max_priority: int = 10,
    max_duration: int = 20,
    arrival_span: int = 100,
) -> list[Job]:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if max_priority < 1 or max_duration < 1 or arrival_span < 0:
        raise ValueError("max_priority and max_duration must be >= 1, arrival_span >= 0")

    rng = random.Random(seed)
    return [
        Job(
            job_id=job_id,
            priority=rng.randint(1, max_priority),
            duration=rng.randint(1, max_duration),
            arrival_time=rng.randint(0, arrival_span),
        )
        for job_id in range(1, count + 1)
    ]
