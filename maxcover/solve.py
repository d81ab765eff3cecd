from __future__ import annotations

import importlib
from typing import Any, Callable, Mapping

from maxcover.extract import extract_solution
from maxcover.model import build_model
from maxcover.types import CoverageModel, Instance, MipResult, Solution

SOLVER_MODULES: dict[str, str] = {
    "pulp_cbc": "maxcover.alg_ilp_pulp",
    "ortools_cp_sat": "maxcover.alg_ilp_ortools",
    "bruteforce": "maxcover.alg_bruteforce",
}

SolverFn = Callable[..., MipResult]


def load_solver(solver_id: str, registry: Mapping[str, str] | None = None) -> SolverFn:
    modules = dict(SOLVER_MODULES)
    if registry:
        modules.update(registry)
    if solver_id not in modules:
        raise ValueError(f"Unknown solver '{solver_id}', expected one of {sorted(modules)}")
    module = importlib.import_module(modules[solver_id])
    if not hasattr(module, "solve"):
        raise AttributeError(f"Solver module has no solve(): {modules[solver_id]}")
    return module.solve


def solve_model(model: CoverageModel, solver: str | SolverFn = "pulp_cbc", **params: Any) -> MipResult:
    fn = load_solver(solver) if isinstance(solver, str) else solver
    return fn(model, **params)


def solve_instance(
    instance: Instance,
    k: int,
    solver: str | SolverFn = "pulp_cbc",
    threads: int = 1,
    time_limit_sec: float | None = None,
    msg: int = 0,
    verify: bool = True,
    **params: Any,
) -> tuple[Solution, MipResult]:
    """Build the coverage model, solve it to optimality and read back the selection."""

    model = build_model(instance, k)
    result = solve_model(
        model,
        solver=solver,
        threads=threads,
        time_limit_sec=time_limit_sec,
        msg=msg,
        **params,
    )
    solution = extract_solution(
        model,
        result.assignment,
        result.objective,
        instance=instance,
        verify=verify,
    )
    return solution, result
