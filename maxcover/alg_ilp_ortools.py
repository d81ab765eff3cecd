from __future__ import annotations

import time
from typing import Any

from maxcover.errors import InfeasibleModel, SolverFailure
from maxcover.types import CoverageModel, MipResult


def _as_int(value: float, what: str) -> int:
    if float(value) != int(value):
        raise ValueError(f"CP-SAT needs integer {what}, got {value}")
    return int(value)


def solve(
    model: CoverageModel,
    threads: int = 1,
    time_limit_sec: float | None = None,
    msg: int = 0,
    seed: int = 0,
    **kwargs: Any,
) -> MipResult:
    """MIP backend via OR-Tools CP-SAT."""

    try:
        from ortools.sat.python import cp_model
    except ImportError as exc:  # pragma: no cover
        raise RuntimeError(
            "Missing dependency 'ortools'. Install it to run OR-Tools algorithm.") from exc

    start = time.perf_counter()

    cp = cp_model.CpModel()
    x = [cp.NewBoolVar(var.name) for var in model.variables]

    for con in model.constraints:
        rhs = _as_int(con.rhs, f"rhs in {con.name}")
        if not con.terms:
            # 0 <sense> rhs, decided without the engine
            holds = {"<=": 0 <= rhs, ">=": 0 >= rhs, "==": rhs == 0}[con.sense]
            if not holds:
                raise InfeasibleModel(f"empty row {con.name} cannot hold")
            continue
        expr = sum(_as_int(coef, f"coefficient in {con.name}") * x[j] for j, coef in con.terms)
        if con.sense == "<=":
            cp.Add(expr <= rhs)
        elif con.sense == ">=":
            cp.Add(expr >= rhs)
        else:
            cp.Add(expr == rhs)

    objective = sum(
        _as_int(var.objective, "objective") * x[j] for j, var in enumerate(model.variables) if var.objective
    )
    if model.sense == "maximize":
        cp.Maximize(objective)
    else:
        cp.Minimize(objective)

    solver = cp_model.CpSolver()
    if time_limit_sec is not None:
        solver.parameters.max_time_in_seconds = float(time_limit_sec)
    solver.parameters.log_search_progress = bool(msg)
    solver.parameters.random_seed = int(seed)
    workers = int(threads)
    if workers > 0:
        solver.parameters.num_search_workers = workers

    status_code = solver.Solve(cp)
    status_name = str(solver.StatusName(status_code)).lower()

    if status_code == cp_model.INFEASIBLE:
        raise InfeasibleModel(f"CP-SAT reports the model infeasible (status={status_name})")
    if status_code != cp_model.OPTIMAL:
        raise SolverFailure(f"CP-SAT did not prove optimality (status={status_name})")

    assignment = tuple(bool(solver.BooleanValue(v)) for v in x)
    runtime_sec = time.perf_counter() - start

    return MipResult(
        status="optimal",
        objective=float(solver.ObjectiveValue()),
        assignment=assignment,
        runtime_sec=float(runtime_sec),
        meta={
            "solver": "ortools_cp_sat",
            "solver_status": status_name,
            "threads": int(max(0, workers)),
            "time_limit_sec": time_limit_sec,
            "msg": int(msg),
            "n_vars": model.n_vars,
            "n_constraints": model.n_constraints,
            "best_objective_bound_raw": float(solver.BestObjectiveBound()),
        },
    )
