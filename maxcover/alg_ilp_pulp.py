from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from maxcover.errors import InfeasibleModel, SolverFailure
from maxcover.types import CoverageModel, MipResult


def solve(
    model: CoverageModel,
    threads: int = 1,
    time_limit_sec: float | None = None,
    msg: int = 0,
    lp_path: str | Path | None = None,
    **kwargs: Any,
) -> MipResult:
    """MIP backend using PuLP + CBC."""

    try:
        import pulp as pl
    except ImportError as exc:  # pragma: no cover
        raise RuntimeError("Missing dependency 'pulp'. Install it to run ILP algorithm.") from exc

    start = time.perf_counter()

    sense = pl.LpMaximize if model.sense == "maximize" else pl.LpMinimize
    prob = pl.LpProblem(model.name, sense)
    x = [pl.LpVariable(var.name, cat=pl.LpBinary) for var in model.variables]

    prob += pl.lpSum(var.objective * x[j] for j, var in enumerate(model.variables))
    for con in model.constraints:
        expr = pl.lpSum(coef * x[j] for j, coef in con.terms)
        if con.sense == "<=":
            prob += expr <= con.rhs, con.name
        elif con.sense == ">=":
            prob += expr >= con.rhs, con.name
        else:
            prob += expr == con.rhs, con.name

    if lp_path is not None:
        Path(lp_path).parent.mkdir(parents=True, exist_ok=True)
        prob.writeLP(str(lp_path))

    solver = pl.PULP_CBC_CMD(
        msg=bool(msg),
        threads=int(threads),
        timeLimit=None if time_limit_sec is None else float(time_limit_sec),
    )
    try:
        status_code = prob.solve(solver)
    except pl.PulpSolverError as exc:
        raise SolverFailure(f"CBC failed: {exc}") from exc
    solver_status = pl.LpStatus.get(status_code, str(status_code))

    if status_code == pl.LpStatusInfeasible:
        raise InfeasibleModel(f"CBC reports the model infeasible (status={solver_status})")
    if status_code != pl.LpStatusOptimal or prob.sol_status == pl.LpSolutionIntegerFeasible:
        raise SolverFailure(f"CBC did not prove optimality (status={solver_status})")

    assignment = tuple(v.value() is not None and v.value() > 0.5 for v in x)
    objective_value = pl.value(prob.objective)
    runtime_sec = time.perf_counter() - start

    return MipResult(
        status="optimal",
        objective=float(objective_value or 0.0),
        assignment=assignment,
        runtime_sec=float(runtime_sec),
        meta={
            "solver": "pulp_cbc",
            "solver_status": solver_status,
            "threads": int(threads),
            "time_limit_sec": time_limit_sec,
            "msg": int(msg),
            "n_vars": model.n_vars,
            "n_constraints": model.n_constraints,
        },
    )
