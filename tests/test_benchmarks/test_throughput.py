"""Tests for the ready pool benchmark."""

from benchmarks.run_benchmark import main
from benchmarks.throughput import PoolBenchmark


def test_all_pools_agree_on_wait_times():
    results = PoolBenchmark(num_jobs=120, seed=3, max_wait_time=10).run_all_pools()

    assert [r["ready_pool"] for r in results] == ["indexed", "linear"]
    assert results[0]["total_wait_time"] == results[1]["total_wait_time"]
    assert results[0]["end_time"] == results[1]["end_time"]
    assert results[0]["priority_changes"] == results[1]["priority_changes"]


def test_single_pool_result_shape():
    result = PoolBenchmark(num_jobs=30, seed=1).run("linear")

    assert result["num_jobs"] == 30
    assert result["wall_clock_sec"] >= 0
    assert result["average_wait_time"] >= 0


def test_cli_prints_summary(capsys):
    results = main(["--num-jobs", "20", "--ready-pool", "indexed"])

    assert len(results) == 1
    out = capsys.readouterr().out
    assert "=== RESULTS ===" in out
    assert "indexed" in out
