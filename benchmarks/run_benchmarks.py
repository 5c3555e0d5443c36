"""
Benchmark suite for c99complex.

Times the scalar kernels on regular operands, on special values (signed
zeros, infinities, NaN) and on operands near overflow, and writes the
results as JSON plus a short text summary.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import argparse
import json
import platform
import time
from dataclasses import asdict, dataclass
from datetime import datetime

import numpy as np

import c99complex as cc
from c99complex import Complex


@dataclass
class BenchmarkResult:
    name: str
    iterations: int
    samples: int
    mean_time: float
    min_time: float

    @property
    def operations_per_second(self) -> float:
        return 1.0 / self.mean_time if self.mean_time > 0 else float("inf")


def benchmark(func, name, iterations=10000, samples=5):
    """Time ``func()`` and return the per-call mean and best sample."""
    timings = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        timings.append((time.perf_counter() - start) / iterations)
    return BenchmarkResult(
        name=name,
        iterations=iterations,
        samples=samples,
        mean_time=float(np.mean(timings)),
        min_time=float(np.min(timings)),
    )


REGULAR = Complex(0.75, -1.25)
OTHER = Complex(-2.5, 0.5)
SPECIALS = {
    "neg_zero": Complex(-0.0, -0.0),
    "inf_nan": Complex(float("inf"), float("nan")),
    "near_overflow": Complex(1e300, 1e300),
    "subnormal": Complex(5e-324, -5e-324),
}


class ComprehensiveBenchmarks:
    """Run benchmark suites for c99complex."""

    def __init__(self, output_dir="benchmark_results", iterations=10000):
        self.output_dir = output_dir
        self.iterations = iterations
        os.makedirs(output_dir, exist_ok=True)
        self.results = {}

    def _run(self, group, funcs):
        results = {}
        for name, func in funcs.items():
            results[name] = benchmark(func, name=name, iterations=self.iterations)
            print(f"  {name:<28} {results[name].mean_time * 1e6:8.3f} us/op")
        self.results[group] = results
        return results

    def run_arithmetic_benchmarks(self):
        """Benchmark the four field operations."""
        print("\n=== Arithmetic Benchmarks ===")
        return self._run(
            "arithmetic",
            {
                "add": lambda: cc.add(REGULAR, OTHER),
                "mul": lambda: cc.mul(REGULAR, OTHER),
                "div": lambda: cc.div(REGULAR, OTHER),
                "div_by_zero": lambda: cc.div(REGULAR, cc.zero()),
                "operator_div": lambda: REGULAR / OTHER,
            },
        )

    def run_transcendental_benchmarks(self):
        """Benchmark exp/log and the circular and hyperbolic families."""
        print("\n=== Transcendental Benchmarks ===")
        funcs = {}
        for name in ("exp", "ln", "sqrt", "sin", "tan", "sinh", "tanh", "sec", "csch"):
            kernel = getattr(cc, name)
            funcs[name] = lambda kernel=kernel: kernel(REGULAR)
        funcs["pow"] = lambda: cc.pow_(REGULAR, OTHER)
        return self._run("transcendental", funcs)

    def run_inverse_benchmarks(self):
        """Benchmark the inverse functions."""
        print("\n=== Inverse Function Benchmarks ===")
        funcs = {}
        for name in ("asin", "acos", "atan", "acot", "asinh", "acosh", "atanh", "acoth", "asech"):
            kernel = getattr(cc, name)
            funcs[name] = lambda kernel=kernel: kernel(REGULAR)
        return self._run("inverse", funcs)

    def run_special_value_benchmarks(self):
        """Benchmark the special value branches."""
        print("\n=== Special Value Benchmarks ===")
        funcs = {}
        for label, z in SPECIALS.items():
            funcs[f"asin_{label}"] = lambda z=z: cc.asin(z)
            funcs[f"atanh_{label}"] = lambda z=z: cc.atanh(z)
            funcs[f"div_{label}"] = lambda z=z: cc.div(REGULAR, z)
        return self._run("special_values", funcs)

    def run_text_benchmarks(self):
        """Benchmark parsing and formatting."""
        print("\n=== Text Benchmarks ===")
        text = cc.to_string(REGULAR)
        return self._run(
            "text",
            {
                "parse": lambda: cc.parse(text),
                "parse_scientific": lambda: cc.parse("1.5e2 - 2.3e-1i"),
                "to_string": lambda: cc.to_string(REGULAR),
            },
        )

    def save_results(self):
        """Save all benchmark results."""
        timestamp = datetime.now().isoformat()

        output = {
            "timestamp": timestamp,
            "results": {
                group: {name: asdict(r) for name, r in results.items()}
                for group, results in self.results.items()
            },
            "system_info": {
                "python": sys.version,
                "platform": platform.platform(),
                "numpy": np.__version__,
                "c99complex": cc.__version__,
            },
        }

        filename = os.path.join(self.output_dir, f"benchmarks_{timestamp}.json")
        with open(filename, "w") as f:
            json.dump(output, f, indent=2, default=str)

        print(f"\nResults saved to {filename}")

        self._save_summary()

    def _save_summary(self):
        """Save a human-readable summary."""
        summary_file = os.path.join(self.output_dir, "summary.txt")

        with open(summary_file, "w") as f:
            f.write("c99complex Benchmark Summary\n")
            f.write("=" * 50 + "\n\n")
            for group, results in self.results.items():
                f.write(f"{group} (ops/sec):\n")
                for name, result in results.items():
                    f.write(f"  {name}: {result.operations_per_second:,.0f}\n")
                f.write("\n")

        print(f"Summary saved to {summary_file}")


def main():
    """Run all benchmarks."""
    parser = argparse.ArgumentParser(description="Run c99complex benchmarks")
    parser.add_argument(
        "--output", default="benchmark_results", help="Output directory for results"
    )
    parser.add_argument(
        "--iterations", type=int, default=10000, help="Calls per timing sample"
    )
    parser.add_argument(
        "--suite",
        nargs="+",
        choices=["arithmetic", "transcendental", "inverse", "special", "text", "all"],
        default=["all"],
        help="Benchmark suites to run",
    )

    args = parser.parse_args()

    print("c99complex Benchmarks")
    print("=====================")

    benchmarks = ComprehensiveBenchmarks(args.output, iterations=args.iterations)

    suites = {
        "arithmetic": benchmarks.run_arithmetic_benchmarks,
        "transcendental": benchmarks.run_transcendental_benchmarks,
        "inverse": benchmarks.run_inverse_benchmarks,
        "special": benchmarks.run_special_value_benchmarks,
        "text": benchmarks.run_text_benchmarks,
    }

    if "all" in args.suite:
        to_run = list(suites.values())
    else:
        to_run = [suites[name] for name in args.suite]

    for func in to_run:
        func()

    benchmarks.save_results()

    print("\n=====================")
    print("Benchmarking complete!")


if __name__ == "__main__":
    main()
