"""
Pydantic schemas for the /simulations endpoints.

These define the HTTP API contract, not the scheduler's internal types:
- JobSpec: one job in a request (the four workload fields)
- SimulationRequest: the workload plus optional overrides
- JobOutcome / PriorityChangeOut: per-job and per-aging-step results
- SimulationResponse: everything one run produced
- SimulationDefaults: the configuration a request falls back to

FastAPI validates incoming data against these automatically.
If someone sends duration=0, FastAPI returns a 422 error before the
scheduler ever sees the job.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import ReadyPoolKind


class JobSpec(BaseModel):
    """One job as submitted: same fields as a workload file line."""

    id: int
    priority: int = Field(..., description="Lower number = scheduled sooner")
    duration: int = Field(..., gt=0, description="Ticks of CPU needed")
    arrival_time: int = Field(..., ge=0, description="Tick at which the job arrives")


class SimulationRequest(BaseModel):
    """Request body for POST /simulations/."""

    jobs: list[JobSpec] = Field(
        default_factory=list,
        examples=[[
            {"id": 1, "priority": 2, "duration": 3, "arrival_time": 0},
            {"id": 2, "priority": 1, "duration": 2, "arrival_time": 0},
        ]],
    )
    max_wait_time: Optional[int] = Field(
        default=None,
        ge=0,
        description="Aging threshold; the server default is used when omitted",
    )
    ready_pool: Optional[ReadyPoolKind] = None


class JobOutcome(BaseModel):
    """How one job fared: built from the engine's ScheduleEntry."""

    job_id: int
    arrival_time: int
    duration: int
    initial_priority: int
    dispatch_priority: int
    start_time: int
    finish_time: int
    wait_time: int

    # from_attributes=True lets Pydantic read the engine's dataclasses directly
    model_config = {"from_attributes": True}


class PriorityChangeOut(BaseModel):
    job_id: int
    time: int
    wait_time: int
    old_priority: int
    new_priority: int

    model_config = {"from_attributes": True}


class SimulationResponse(BaseModel):
    """Response body for POST /simulations/."""

    job_count: int
    total_wait_time: int
    average_wait_time: float
    end_time: int
    max_wait_time: int
    ready_pool: ReadyPoolKind
    jobs: list[JobOutcome]                   # in dispatch order
    priority_changes: list[PriorityChangeOut]
    trace: list[str]


class SimulationDefaults(BaseModel):
    """Response body for GET /simulations/defaults."""

    max_wait_time: int
    ready_pool: ReadyPoolKind
