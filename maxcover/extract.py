from __future__ import annotations

from typing import Iterable, Sequence

from maxcover.errors import SolverFailure
from maxcover.types import CoverageModel, Instance, Solution


def coverage_of(instance: Instance, selected: Iterable[int]) -> int:
    covered: set[int] = set()
    for i in selected:
        covered.update(instance.sets[i])
    return len(covered)


def extract_solution(
    model: CoverageModel,
    assignment: Sequence[bool],
    objective: float,
    instance: Instance | None = None,
    verify: bool = False,
    tol: float = 1e-6,
) -> Solution:
    """Map a solver assignment back to selected set indices.

    With ``verify`` (requires ``instance``) the coverage of the selection is
    recomputed and compared to ``objective``.
    """

    selected = tuple(i for i, var in enumerate(model.set_vars) if assignment[var])

    if verify:
        if instance is None:
            raise ValueError("verify=True requires the instance")
        if len(selected) > model.k:
            raise SolverFailure(f"solver selected {len(selected)} sets, k={model.k}")
        covered = coverage_of(instance, selected)
        if abs(covered - float(objective)) > tol:
            raise SolverFailure(
                f"reported objective {objective} does not match coverage {covered} of the selection"
            )

    return Solution(objective=float(objective), sol=selected)
