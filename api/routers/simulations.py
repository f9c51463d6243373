"""
Simulation endpoints.

POST /simulations/          → Run one simulation on the submitted jobs
GET  /simulations/defaults  → Aging threshold and ready pool used when a request omits them

The API is stateless: every POST builds fresh Job objects, runs the engine
to completion in-process and returns the result. Nothing is stored between
requests.
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from api.schemas.simulation import (
    JobOutcome,
    PriorityChangeOut,
    SimulationDefaults,
    SimulationRequest,
    SimulationResponse,
)
from config.settings import Settings
from models.enums import ReadyPoolKind
from models.job import Job
from scheduler.engine import run_simulation
from scheduler.trace import TraceRecorder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/", response_model=SimulationResponse)
def create_simulation(
    request: SimulationRequest,
    config: Settings = Depends(get_settings),
) -> SimulationResponse:
    """
    Run a simulation and return its full result.

    Declared as a plain `def`: the simulation is CPU-bound, so FastAPI runs
    it in its threadpool instead of blocking the event loop.
    """
    max_wait_time = config.MAX_WAIT_TIME if request.max_wait_time is None else request.max_wait_time
    ready_pool = ReadyPoolKind(request.ready_pool or config.READY_POOL)

    jobs = [
        Job(job_id=spec.id, priority=spec.priority, duration=spec.duration, arrival_time=spec.arrival_time)
        for spec in request.jobs
    ]
    recorder = TraceRecorder()
    result = run_simulation(jobs, max_wait_time=max_wait_time, trace=recorder, ready_pool=ready_pool)
    logger.info(f"Simulated {result.job_count} jobs, average wait {result.average_wait_time:.2f}")

    return SimulationResponse(
        job_count=result.job_count,
        total_wait_time=result.total_wait_time,
        average_wait_time=result.average_wait_time,
        end_time=result.end_time,
        max_wait_time=result.max_wait_time,
        ready_pool=ready_pool,
        jobs=[JobOutcome.model_validate(entry) for entry in result.schedule],
        priority_changes=[PriorityChangeOut.model_validate(c) for c in result.priority_changes],
        trace=recorder.lines,
    )


@router.get("/defaults", response_model=SimulationDefaults)
def get_simulation_defaults(
    config: Settings = Depends(get_settings),
) -> SimulationDefaults:
    return SimulationDefaults(
        max_wait_time=config.MAX_WAIT_TIME,
        ready_pool=ReadyPoolKind(config.READY_POOL),
    )
