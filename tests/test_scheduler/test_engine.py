"""
Tests for the SchedulerEngine.

The first group pins down small hand-computed runs tick by tick.
The second group checks properties that must hold for any workload,
using seeded random workloads from the generator.
"""

import pytest

from jobs.generator import generate_jobs
from models.arrivals import ArrivalSequence
from models.enums import JobState, ReadyPoolKind
from models.job import Job
from scheduler.base import SchedulerInvariantError
from scheduler.engine import SchedulerEngine, run_simulation
from scheduler.trace import TraceRecorder


def _job(job_id: int, priority: int, duration: int, arrival_time: int) -> Job:
    return Job(job_id=job_id, priority=priority, duration=duration, arrival_time=arrival_time)


# ── Hand-computed runs ──────────────────────────────────────────

def test_single_job():
    job = _job(1, priority=1, duration=5, arrival_time=0)
    trace = TraceRecorder()

    result = run_simulation([job], trace=trace)

    assert result.total_wait_time == 0
    assert result.average_wait_time == 0.0
    assert result.end_time == 5
    assert [(e.job_id, e.start_time, e.finish_time, e.wait_time) for e in result.schedule] == [(1, 0, 5, 0)]
    assert job.wait_time == 0
    assert job.state == JobState.FINISHED
    assert job.run_start_time is None
    assert trace.lines == [
        "Maximum wait time = 30",
        "Job removed from ready pool: id = 1, at time 0, wait time = 0, total wait time = 0",
        "Job id = 1, priority = 1, arrival = 0, duration = 5",
        "Arrival sequence becomes empty at time 0",
        "Job 1 is finished at time 5",
        "Update priority:",
    ]


def test_better_priority_runs_first():
    first = _job(1, priority=2, duration=3, arrival_time=0)
    second = _job(2, priority=1, duration=2, arrival_time=0)

    result = run_simulation([first, second])

    assert [(e.job_id, e.start_time, e.finish_time, e.wait_time) for e in result.schedule] == [
        (2, 0, 2, 0),
        (1, 2, 5, 2),
    ]
    assert result.total_wait_time == 2
    assert result.average_wait_time == 1.0


def test_finish_and_next_dispatch_share_a_tick():
    """No idle tick between one job finishing and the next starting."""
    result = run_simulation([_job(1, 1, 4, 0), _job(2, 2, 4, 1), _job(3, 3, 4, 2)])

    starts = [e.start_time for e in result.schedule]
    finishes = [e.finish_time for e in result.schedule]
    assert starts == [0, 4, 8]
    assert finishes == [4, 8, 12]
    assert result.end_time == 12


def test_starving_job_ages():
    slow = _job(1, priority=5, duration=2, arrival_time=0)
    hog = _job(2, priority=1, duration=40, arrival_time=0)

    result = run_simulation([slow, hog], max_wait_time=10)

    assert slow.priority < 5
    assert slow.priority == 4
    assert slow.wait_time == 40
    assert result.total_wait_time == 40
    assert result.average_wait_time == 20.0
    assert len(result.priority_changes) == 1
    change = result.priority_changes[0]
    assert (change.job_id, change.time, change.wait_time) == (1, 40, 40)
    assert (change.old_priority, change.new_priority) == (5, 4)


def test_repeated_aging_across_several_finishes():
    """
    t=0   job 2 runs; 1, 3, 4 wait
    t=5   2 done → every waiter has waited 5 > 3: 1: 9→8, 3: 1→0, 4: 1→0; 3 runs
    t=10  3 done → 1: 8→7, 4: 0→-1; 4 runs
    t=15  4 done → 1: 7→6; 1 runs
    """
    jobs = [_job(1, 9, 1, 0), _job(2, 1, 5, 0), _job(3, 1, 5, 0), _job(4, 1, 5, 0)]

    result = run_simulation(jobs, max_wait_time=3)

    assert [e.job_id for e in result.schedule] == [2, 3, 4, 1]
    assert [e.wait_time for e in result.schedule] == [0, 5, 10, 15]
    assert result.total_wait_time == 30
    assert jobs[0].priority == 6
    assert jobs[3].priority == -1
    assert result.schedule[-1].dispatch_priority == 6
    assert result.schedule[-1].initial_priority == 9


def test_wait_equal_to_threshold_does_not_age():
    waiter = _job(2, priority=2, duration=1, arrival_time=0)
    run_simulation([_job(1, 1, 5, 0), waiter], max_wait_time=5)
    assert waiter.priority == 2


def test_idle_cpu_until_first_arrival():
    result = run_simulation([_job(1, 1, 2, 3)])

    assert result.schedule[0].start_time == 3
    assert result.schedule[0].wait_time == 0
    assert result.end_time == 5


def test_several_jobs_arrive_on_one_tick():
    jobs = [_job(1, 3, 1, 2), _job(2, 2, 1, 2), _job(3, 1, 1, 2)]
    result = run_simulation(jobs)
    assert [e.job_id for e in result.schedule] == [3, 2, 1]


def test_late_better_job_does_not_preempt():
    result = run_simulation([_job(1, 9, 10, 0), _job(2, 1, 1, 1)])

    assert [(e.job_id, e.start_time) for e in result.schedule] == [(1, 0), (2, 10)]


def test_empty_workload():
    result = run_simulation([])

    assert result.job_count == 0
    assert result.total_wait_time == 0
    assert result.average_wait_time == 0.0
    assert result.end_time == 0
    assert result.schedule == []


def test_average_uses_original_job_count():
    arrivals = ArrivalSequence([_job(1, 1, 3, 0), _job(2, 1, 3, 0), _job(3, 1, 3, 0)])
    result = SchedulerEngine(arrivals).simulate()

    assert arrivals.is_empty()
    assert result.job_count == 3
    assert result.average_wait_time == pytest.approx((0 + 3 + 6) / 3)


def test_engine_reports_threshold():
    engine = SchedulerEngine(ArrivalSequence([]), max_wait_time=12)
    assert engine.max_wait_time == 12
    assert engine.simulate().max_wait_time == 12


def test_dispatch_while_running_is_an_invariant_error():
    engine = SchedulerEngine(ArrivalSequence([]))
    engine.ready_pool.insert(_job(1, 1, 5, 0))
    engine.ready_pool.insert(_job(2, 1, 5, 0))
    engine._dispatch()

    with pytest.raises(SchedulerInvariantError):
        engine._dispatch()


def test_finish_with_idle_cpu_is_an_invariant_error():
    engine = SchedulerEngine(ArrivalSequence([]))
    assert engine.running_job is None
    with pytest.raises(SchedulerInvariantError):
        engine._finish()


# ── Properties over random workloads ────────────────────────────

SEEDS = [1, 2, 3, 17, 99]


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("ready_pool", [kind.value for kind in ReadyPoolKind])
def test_total_wait_is_sum_of_recorded_waits(seed, ready_pool):
    jobs = generate_jobs(80, seed=seed, arrival_span=60)
    result = run_simulation(jobs, max_wait_time=15, ready_pool=ready_pool)

    assert result.total_wait_time == sum(job.wait_time for job in jobs)
    assert result.total_wait_time == sum(e.wait_time for e in result.schedule)
    assert all(job.state == JobState.FINISHED for job in jobs)
    assert len(result.schedule) == len(jobs)


@pytest.mark.parametrize("seed", SEEDS)
def test_never_two_jobs_on_the_cpu(seed):
    result = run_simulation(generate_jobs(80, seed=seed, arrival_span=60), max_wait_time=15)

    for before, after in zip(result.schedule, result.schedule[1:]):
        assert after.start_time >= before.finish_time
    for entry in result.schedule:
        assert entry.finish_time - entry.start_time == entry.duration
        assert entry.start_time >= entry.arrival_time
        assert entry.wait_time == entry.start_time - entry.arrival_time


@pytest.mark.parametrize("seed", SEEDS)
def test_priorities_only_improve_and_only_when_a_job_finishes(seed):
    jobs = generate_jobs(80, seed=seed, arrival_span=60)
    result = run_simulation(jobs, max_wait_time=10)
    finish_times = {e.finish_time for e in result.schedule}

    for change in result.priority_changes:
        assert change.new_priority == change.old_priority - 1
        assert change.time in finish_times
        assert change.wait_time > 10

    for job in jobs:
        steps = [c for c in result.priority_changes if c.job_id == job.job_id]
        assert job.priority == job.initial_priority - len(steps)
        assert [c.old_priority for c in steps] == list(
            range(job.initial_priority, job.initial_priority - len(steps), -1)
        )


@pytest.mark.parametrize("seed", SEEDS)
def test_same_input_gives_same_trace(seed):
    traces = []
    totals = []
    for ready_pool in ["indexed", "indexed", "linear"]:
        trace = TraceRecorder()
        result = run_simulation(
            generate_jobs(60, seed=seed, arrival_span=40),
            max_wait_time=12,
            trace=trace,
            ready_pool=ready_pool,
        )
        traces.append(trace.lines)
        totals.append((result.total_wait_time, result.average_wait_time, result.end_time))

    assert traces[0] == traces[1] == traces[2]
    assert totals[0] == totals[1] == totals[2]


def test_terminates_with_unit_durations_and_late_arrivals():
    jobs = [_job(i, 1, 1, i * 7) for i in range(20)]
    result = run_simulation(jobs)
    assert result.end_time == 19 * 7 + 1
    assert result.total_wait_time == 0
