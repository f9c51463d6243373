"""
Job: the unit of simulated work.

Identity, arrival time and duration never change after construction.
Priority changes only through the aging pass; wait_time and run_start_time
are bookkeeping the engine fills in as the job moves through its lifecycle:

    NOT_ARRIVED → WAITING → RUNNING → FINISHED

eq=False keeps the default identity-based __eq__/__hash__. Two jobs read
from the same workload may share an id, so the ready pool tracks presence
by object identity, never by id or priority.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import JobState


@dataclass(eq=False)
class Job:
    job_id: int
    priority: int              # lower number = scheduled sooner
    duration: int              # ticks of CPU needed once running
    arrival_time: int          # tick at which the job may enter the ready pool
    initial_priority: int = field(init=False)
    wait_time: Optional[int] = field(default=None, init=False)       # set once, at dispatch
    run_start_time: Optional[int] = field(default=None, init=False)  # None = not running
    state: JobState = field(default=JobState.NOT_ARRIVED, init=False)

    def __post_init__(self) -> None:
        self.initial_priority = self.priority

    @property
    def is_running(self) -> bool:
        return self.run_start_time is not None

    def describe(self) -> str:
        return (
            f"Job id = {self.job_id}, priority = {self.priority}, "
            f"arrival = {self.arrival_time}, duration = {self.duration}"
        )

    def __repr__(self) -> str:
        return (
            f"<Job {self.job_id} pri={self.priority} arr={self.arrival_time} "
            f"dur={self.duration} {self.state.value}>"
        )
