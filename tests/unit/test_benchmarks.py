"""Timing smoke tests and a dry run of the benchmark runner."""

import importlib.util
import json
from pathlib import Path

import pytest

import c99complex as cc
from c99complex import Complex

RUNNER = Path(__file__).resolve().parents[2] / "benchmarks" / "run_benchmarks.py"


def _load_runner():
    spec = importlib.util.spec_from_file_location("run_benchmarks", RUNNER)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.benchmark
class TestKernelTiming:
    def test_asin_special_values(self, benchmark):
        z = Complex(float("inf"), float("nan"))
        result = benchmark(cc.asin, z)
        assert result.is_nan() or result.is_infinite()

    def test_div_pedantic(self, benchmark):
        result = benchmark.pedantic(lambda: cc.div(Complex(1, 2), Complex(3, 4)), rounds=5)
        assert result == cc.div(Complex(1, 2), Complex(3, 4))


@pytest.mark.benchmark
def test_runner_writes_reports(tmp_path):
    runner = _load_runner()
    suite = runner.ComprehensiveBenchmarks(str(tmp_path), iterations=3)
    results = suite.run_text_benchmarks()
    assert set(results) == {"parse", "parse_scientific", "to_string"}
    assert all(r.mean_time > 0 for r in results.values())

    suite.save_results()
    reports = list(tmp_path.glob("benchmarks_*.json"))
    assert len(reports) == 1
    data = json.loads(reports[0].read_text())
    assert data["results"]["text"]["parse"]["iterations"] == 3
    assert (tmp_path / "summary.txt").read_text().startswith("c99complex Benchmark Summary")
