"""Benchmark: Risk classification throughput — classifications per second.

Measures how many RiskClassifier.classify() calls complete per second against
the default risk areas, with a cold and a warm pattern cache.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aumos_team_governance.matching.pattern_set import PatternMatcher
from aumos_team_governance.risk.classifier import RiskClassifier

_ITERATIONS: int = 10_000

_PATHS: list[str] = [
    "services/payment/api/routes.py",
    "app/services/user_service.ts",
    "src/api/handlers.py",
    "src/utils/strings.py",
    "README.md",
    "docs/architecture/overview.md",
]


def bench_classify_throughput() -> dict[str, object]:
    """Benchmark RiskClassifier.classify() throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, cold_compile_ms.
    """
    matcher = PatternMatcher()
    classifier = RiskClassifier(matcher=matcher)

    t0 = time.perf_counter()
    for path in _PATHS:
        classifier.classify(path)
    cold_ms = (time.perf_counter() - t0) * 1000

    start = time.perf_counter()
    for index in range(_ITERATIONS):
        classifier.classify(_PATHS[index % len(_PATHS)])
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "risk_classify_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
        "cold_compile_ms": round(cold_ms, 4),
        "compiled_patterns": matcher.cache_size,
    }
    print(
        f"[bench_classify_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg={result['avg_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_classify_throughput()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "classify_throughput_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
