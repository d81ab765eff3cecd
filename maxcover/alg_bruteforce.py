from __future__ import annotations

import itertools
import time
from typing import Any

from maxcover.errors import InfeasibleModel, SolverFailure
from maxcover.model import evaluate_assignment
from maxcover.types import CoverageModel, MipResult


def solve(
    model: CoverageModel,
    threads: int = 1,
    time_limit_sec: float | None = None,
    msg: int = 0,
    max_vars: int = 20,
    **kwargs: Any,
) -> MipResult:
    """Exhaustive search over every 0/1 assignment. Small models only."""

    if model.n_vars > max_vars:
        raise SolverFailure(f"bruteforce is limited to {max_vars} variables, model has {model.n_vars}")

    start = time.perf_counter()
    maximize = model.sense == "maximize"

    best: tuple[bool, ...] | None = None
    best_obj = 0.0
    checked = 0
    for bits in itertools.product((False, True), repeat=model.n_vars):
        if time_limit_sec is not None and time.perf_counter() - start > time_limit_sec:
            raise SolverFailure(f"bruteforce hit the time limit after {checked} assignments")
        checked += 1
        feasible, obj = evaluate_assignment(model, bits)
        if not feasible:
            continue
        if best is None or (obj > best_obj if maximize else obj < best_obj):
            best, best_obj = bits, obj

    if best is None:
        raise InfeasibleModel("no assignment satisfies every constraint")

    runtime_sec = time.perf_counter() - start
    return MipResult(
        status="optimal",
        objective=float(best_obj),
        assignment=best,
        runtime_sec=float(runtime_sec),
        meta={
            "solver": "bruteforce",
            "solver_status": "optimal",
            "assignments_checked": checked,
            "n_vars": model.n_vars,
            "n_constraints": model.n_constraints,
        },
    )
