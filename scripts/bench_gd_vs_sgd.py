# scripts/bench_gd_vs_sgd.py
"""
Microbench: GradientDesc vs StochasticGD on a synthetic least-squares problem.

What it measures
----------------
- Wall-clock latency of one `optimize` call per strategy (median/p95 over
  repeats, after warmup iterations that are not recorded).
- Final halved MSE and distance to the closed-form least-squares solution.

Notes
-----
- Data are drawn once from a fixed seed; every repeat starts from zeros, so
  the optimizers do identical work each time.
- StochasticGD makes ``1 + iters * (rows - 1)`` single-row gradient calls,
  so its latency is dominated by Python call overhead for small feature counts.

Example
-------
python scripts/bench_gd_vs_sgd.py --rows 500 --features 8 --gd_iters 200 \
    --sgd_iters 5 --warmup 2 --repeats 10
"""

from __future__ import annotations

import argparse
import math
import statistics
import time
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from gradopt.infrastructure.models import LinearRegressor  # noqa: E402
from gradopt.infrastructure.optimizers import GradientDesc, StochasticGD  # noqa: E402


# ----------------------------
# Stats helpers
# ----------------------------
def _median(xs: Sequence[float]) -> float:
    return statistics.median(xs) if xs else float("nan")


def _p95(xs: Sequence[float]) -> float:
    if not xs:
        return float("nan")
    ys = sorted(xs)
    k = int(math.ceil(0.95 * len(ys))) - 1
    k = max(0, min(k, len(ys) - 1))
    return ys[k]


def _fmt_ms(sec: float) -> str:
    return f"{sec * 1e3:10.3f} ms"


@dataclass
class BenchResult:
    name: str
    med: float
    p95: float
    cost: float
    dist: float


def _time_call(fn: Callable[[], np.ndarray], *, warmup: int, repeats: int) -> List[float]:
    for _ in range(warmup):
        fn()

    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=500)
    ap.add_argument("--features", type=int, default=8)
    ap.add_argument("--noise", type=float, default=0.05)
    ap.add_argument("--gd_alpha", type=float, default=0.3)
    ap.add_argument("--gd_iters", type=int, default=200)
    ap.add_argument("--sgd_alpha", type=float, default=0.1)
    ap.add_argument("--sgd_mu", type=float, default=0.1)
    ap.add_argument("--sgd_iters", type=int, default=5)
    ap.add_argument("--warmup", type=int, default=2)
    ap.add_argument("--repeats", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    rng = np.random.default_rng(args.seed)
    x = np.hstack(
        [np.ones((args.rows, 1)), rng.standard_normal((args.rows, args.features))]
    )
    true_beta = rng.standard_normal(args.features + 1)
    y = x @ true_beta + args.noise * rng.standard_normal(args.rows)
    best, *_ = np.linalg.lstsq(x, y, rcond=None)

    model = LinearRegressor()
    start = np.zeros(x.shape[1])

    strategies = {
        "GradientDesc": GradientDesc(alpha=args.gd_alpha, iters=args.gd_iters),
        "StochasticGD": StochasticGD(
            alpha=args.sgd_alpha, mu=args.sgd_mu, iters=args.sgd_iters
        ),
    }

    print("=" * 80)
    print(
        f"GD vs SGD bench | rows={args.rows} features={args.features} "
        f"warmup={args.warmup} repeats={args.repeats}"
    )
    print("=" * 80)

    results: List[BenchResult] = []
    for name, alg in strategies.items():
        times = _time_call(
            lambda: alg.optimize(model, start, x, y),
            warmup=args.warmup,
            repeats=args.repeats,
        )
        params = alg.optimize(model, start, x, y)
        cost, _ = model.compute_grad(params, x, y)
        results.append(
            BenchResult(
                name=name,
                med=_median(times),
                p95=_p95(times),
                cost=cost,
                dist=float(np.linalg.norm(params - best)),
            )
        )

    print(f"{'strategy':<14} {'median':>13} {'p95':>13} {'cost':>12} {'|w - w*|':>12}")
    for r in results:
        print(
            f"{r.name:<14} {_fmt_ms(r.med)} {_fmt_ms(r.p95)} "
            f"{r.cost:12.6f} {r.dist:12.6f}"
        )


if __name__ == "__main__":
    main()
