"""
Throughput benchmark: simulated jobs per second under each ready pool.

How it works:
1. Generate one seeded random workload
2. Simulate it with each ready pool structure (fresh Job objects per run)
3. Measure wall-clock time of simulate() only
4. Calculate: throughput = num_jobs / elapsed

A heavy arrival rate keeps the pool large, which is where the linear
pool's O(n) re-sequencing during aging starts to show. Both structures
share one ordering key, so their wait-time totals must match exactly;
run() reports them so a mismatch is visible.
"""

import time
from typing import Optional

from jobs.generator import generate_jobs
from models.enums import ReadyPoolKind
from scheduler.engine import run_simulation


class PoolBenchmark:

    def __init__(self, num_jobs: int = 1000, seed: int = 42, max_wait_time: Optional[int] = None):
        self.num_jobs = num_jobs
        self.seed = seed
        self.max_wait_time = max_wait_time

    def _workload(self):
        # Arrivals squeezed into a short span so jobs pile up in the pool
        return generate_jobs(self.num_jobs, seed=self.seed, arrival_span=max(1, self.num_jobs // 4))

    def run(self, ready_pool: str) -> dict:
        """Run the benchmark for a single ready pool structure."""
        jobs = self._workload()

        start = time.perf_counter()
        result = run_simulation(jobs, max_wait_time=self.max_wait_time, ready_pool=ready_pool)
        elapsed = time.perf_counter() - start

        return {
            "ready_pool": ready_pool,
            "num_jobs": self.num_jobs,
            "wall_clock_sec": round(elapsed, 4),
            "throughput_jobs_per_sec": round(self.num_jobs / elapsed, 2) if elapsed > 0 else None,
            "end_time": result.end_time,
            "total_wait_time": result.total_wait_time,
            "average_wait_time": round(result.average_wait_time, 3),
            "priority_changes": len(result.priority_changes),
        }

    def run_all_pools(self) -> list[dict]:
        """Benchmark every ready pool structure on the same workload."""
        return [self.run(kind.value) for kind in ReadyPoolKind]
