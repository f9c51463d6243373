"""
Scheduler Engine: the core orchestrator.

Runs one non-preemptive priority simulation on a logical clock. Each
iteration of the loop is one look at the world at `current_time`:

    1. Admit every job whose arrival_time has been reached
       → arrival sequence → ready pool
    2. If the CPU is idle, dispatch the best waiting job
       → ready pool → CPU
    3. If the running job has used up its duration, finish it and run
       the aging pass over whoever is still waiting.
       The clock does NOT advance on a finish, so a waiting job can
       start on the same tick the previous one ended.
    4. Otherwise advance the clock one tick.

Once the arrival sequence is empty, steps 2-4 repeat until the ready pool
is empty and the CPU is idle.

      ArrivalSequence           ReadyPool                CPU
    ┌────────────────┐     ┌────────────────┐     ┌──────────────┐
    │ jobs by arrival│────>│ jobs by        │────>│ Idle |       │
    │                │admit│ priority       │pop  │ Running(job) │
    └────────────────┘     └────────────────┘     └──────────────┘
                                   ^                     │ finish
                                   └──── aging pass ─────┘
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from config.settings import settings
from models.arrivals import ArrivalSequence
from models.enums import JobState, ReadyPoolKind
from models.job import Job
from scheduler.aging import AgingPolicy, PriorityChange
from scheduler.base import AbstractReadyPool, SchedulerInvariantError
from scheduler.registry import create_ready_pool
from scheduler.trace import TraceSink, discard

logger = logging.getLogger(__name__)


# ── CPU slot ────────────────────────────────────────────────────
# A tagged variant instead of an Optional[Job]: the engine holds exactly
# one of these, so "two running jobs" cannot be represented.

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Running:
    job: Job
    start_time: int


CpuSlot = Union[Idle, Running]
IDLE = Idle()


# ── Results ─────────────────────────────────────────────────────

@dataclass
class ScheduleEntry:
    """One job's run, recorded when it finishes."""
    job_id: int
    arrival_time: int
    duration: int
    initial_priority: int
    dispatch_priority: int   # priority after any aging, at the moment it was picked
    start_time: int
    finish_time: int
    wait_time: int


@dataclass
class SimulationResult:
    total_wait_time: int
    job_count: int           # original number of jobs, before the run drained them
    end_time: int
    max_wait_time: int
    schedule: list[ScheduleEntry] = field(default_factory=list)
    priority_changes: list[PriorityChange] = field(default_factory=list)

    @property
    def average_wait_time(self) -> float:
        if self.job_count == 0:
            return 0.0
        return self.total_wait_time / self.job_count


class SchedulerEngine:
    """
    Owns the clock, the ready pool and the CPU slot for one simulation.

    The engine never executes anything: a job "runs" by holding the CPU
    slot while the clock ticks past its duration.
    """

    def __init__(
        self,
        arrivals: ArrivalSequence,
        max_wait_time: Optional[int] = None,
        trace: Optional[TraceSink] = None,
        ready_pool: Union[ReadyPoolKind, str, None] = None,
    ):
        self._arrivals = arrivals
        self._aging = AgingPolicy(
            settings.MAX_WAIT_TIME if max_wait_time is None else max_wait_time
        )
        self._trace: TraceSink = trace if trace is not None else discard
        self._pool_kind = ready_pool or settings.READY_POOL
        self._reset()

    @property
    def max_wait_time(self) -> int:
        return self._aging.max_wait_time

    @property
    def is_running(self) -> bool:
        return isinstance(self._slot, Running)

    @property
    def running_job(self) -> Optional[Job]:
        return self._slot.job if isinstance(self._slot, Running) else None

    @property
    def ready_pool(self) -> AbstractReadyPool:
        return self._pool

    def _reset(self) -> None:
        self.current_time: int = 0
        self.total_wait_time: int = 0
        self._slot: CpuSlot = IDLE
        self._pool: AbstractReadyPool = create_ready_pool(self._pool_kind)
        self._schedule: list[ScheduleEntry] = []
        self._priority_changes: list[PriorityChange] = []

    def simulate(self) -> SimulationResult:
        """
        Run the simulation to completion.

        The arrival sequence is consumed, so each engine simulates its
        jobs once; build a new ArrivalSequence to run the same workload again.
        """
        self._reset()
        logger.info(
            f"Simulating {self._arrivals.original_count} jobs "
            f"(max wait time {self.max_wait_time}, {self._pool.kind} ready pool)"
        )
        self._trace(f"Maximum wait time = {self.max_wait_time}")

        while not self._arrivals.is_empty():
            self._admit_arrivals()
            self._dispatch_if_idle()
            if self._arrivals.is_empty():
                self._trace(f"Arrival sequence becomes empty at time {self.current_time}")
            self._finish_or_advance()

        # Everything has arrived; run whatever is still waiting
        while not self._pool.is_empty() or self.is_running:
            self._tick()

        result = SimulationResult(
            total_wait_time=self.total_wait_time,
            job_count=self._arrivals.original_count,
            end_time=self.current_time,
            max_wait_time=self.max_wait_time,
            schedule=self._schedule,
            priority_changes=self._priority_changes,
        )
        logger.info(
            f"Simulation finished at time {result.end_time}: "
            f"total wait {result.total_wait_time}, average {result.average_wait_time:.2f}"
        )
        return result

    def _admit_arrivals(self) -> None:
        """Move every job that has arrived by now into the ready pool."""
        while not self._arrivals.is_empty() and self._arrivals.peek().arrival_time <= self.current_time:
            job = self._arrivals.pop()
            job.state = JobState.WAITING
            self._pool.insert(job)

    def _tick(self) -> None:
        self._dispatch_if_idle()
        self._finish_or_advance()

    def _dispatch_if_idle(self) -> None:
        if not self.is_running and not self._pool.is_empty():
            self._dispatch()

    def _finish_or_advance(self) -> None:
        if self.is_running and self._running_job_finished():
            self._finish()
        else:
            self.current_time += 1

    def _dispatch(self) -> None:
        if self.is_running:
            raise SchedulerInvariantError(
                f"dispatch at time {self.current_time} while job {self.running_job.job_id} is running"
            )

        job = self._pool.extract_best()
        if job.wait_time is not None:
            raise SchedulerInvariantError(f"job {job.job_id} dispatched twice")

        job.wait_time = self.current_time - job.arrival_time
        self.total_wait_time += job.wait_time
        job.run_start_time = self.current_time
        job.state = JobState.RUNNING
        self._slot = Running(job=job, start_time=self.current_time)

        self._trace(
            f"Job removed from ready pool: id = {job.job_id}, at time {self.current_time}, "
            f"wait time = {job.wait_time}, total wait time = {self.total_wait_time}"
        )
        self._trace(job.describe())
        logger.debug(f"Dispatched job {job.job_id} at time {self.current_time}")

    def _running_job_finished(self) -> bool:
        slot = self._slot
        if not isinstance(slot, Running):
            raise SchedulerInvariantError(
                f"completion check at time {self.current_time} with no running job"
            )
        return self.current_time - slot.start_time >= slot.job.duration

    def _finish(self) -> None:
        slot = self._slot
        if not isinstance(slot, Running):
            raise SchedulerInvariantError(f"finish at time {self.current_time} with no running job")

        job = slot.job
        self._slot = IDLE
        job.run_start_time = None
        job.state = JobState.FINISHED
        self._schedule.append(ScheduleEntry(
            job_id=job.job_id,
            arrival_time=job.arrival_time,
            duration=job.duration,
            initial_priority=job.initial_priority,
            dispatch_priority=job.priority,
            start_time=slot.start_time,
            finish_time=self.current_time,
            wait_time=job.wait_time,
        ))
        self._trace(f"Job {job.job_id} is finished at time {self.current_time}")

        changes = self._aging.apply(self._pool, self.current_time, self._trace)
        self._priority_changes.extend(changes)


def run_simulation(
    jobs: Iterable[Job],
    max_wait_time: Optional[int] = None,
    trace: Optional[TraceSink] = None,
    ready_pool: Union[ReadyPoolKind, str, None] = None,
) -> SimulationResult:
    """Build an arrival sequence from `jobs` and simulate it once."""
    engine = SchedulerEngine(
        ArrivalSequence(jobs),
        max_wait_time=max_wait_time,
        trace=trace,
        ready_pool=ready_pool,
    )
    return engine.simulate()
