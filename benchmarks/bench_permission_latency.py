"""Benchmark: Permission check latency — per-check p50/p99.

Measures the per-call latency of PermissionResolver.check() over a fixed mix
of allowed writes, boundary violations and restricted-area denials.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aumos_team_governance.permissions.resolver import PermissionResolver

_WARMUP: int = 100
_ITERATIONS: int = 5_000

# (role_id, domain, path)
_CASES: list[tuple[str, str | None, str]] = [
    ("domain-developer", "auth", "src/domains/auth/models/user.py"),
    ("domain-developer", "auth", "src/domains/payment/order.py"),
    ("part-leader", "auth", "contracts/interfaces/auth-api.yaml"),
    ("dba", None, "src/domains/auth/services/user_service.py"),
    ("project-manager", None, "management/requests/to-auth/req-1.md"),
    ("qa-manager", None, "design/auth/login.md"),
]


def bench_permission_check_latency() -> dict[str, object]:
    """Benchmark PermissionResolver.check() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_latency_ms, p99_latency_ms.
    """
    resolver = PermissionResolver()

    for index in range(_WARMUP):
        resolver.check(*_CASES[index % len(_CASES)])

    latencies_ms: list[float] = []
    for index in range(_ITERATIONS):
        case = _CASES[index % len(_CASES)]
        t0 = time.perf_counter()
        resolver.check(*case)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "permission_check_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_latency_ms": round(sorted_lats[n // 2], 4),
        "p99_latency_ms": round(sorted_lats[min(int(n * 0.99), n - 1)], 4),
    }
    print(
        f"[bench_permission_latency] {result['operation']}: "
        f"p99={result['p99_latency_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_permission_check_latency()


if __name__ == "__main__":
    result = run_benchmark()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "permission_latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
