from __future__ import annotations

from types import MappingProxyType
from typing import Sequence

from maxcover.errors import MalformedInstance
from maxcover.types import Constraint, CoverageModel, Instance, Variable

EPS = 1e-9


def validate_instance(instance: Instance) -> None:
    ground = list(instance.ground)
    for e in ground:
        if isinstance(e, bool) or not isinstance(e, int) or e < 0:
            raise MalformedInstance(f"ground element must be a non-negative integer: {e!r}")
    ground_set = set(ground)
    if len(ground_set) != len(ground):
        raise MalformedInstance("ground contains duplicate elements")

    seen: dict[frozenset[int], int] = {}
    for idx, items in enumerate(instance.sets):
        if not items:
            raise MalformedInstance(f"set {idx} is empty")
        if any(isinstance(e, bool) or not isinstance(e, int) for e in items):
            raise MalformedInstance(f"set {idx} has a non-integer element")
        members = frozenset(items)
        if len(members) != len(items):
            raise MalformedInstance(f"set {idx} contains duplicate elements")
        outside = members - ground_set
        if outside:
            raise MalformedInstance(f"set {idx} has elements outside ground: {sorted(outside)}")
        if members in seen:
            raise MalformedInstance(f"set {idx} duplicates set {seen[members]}")
        seen[members] = idx


def build_model(instance: Instance, k: int) -> CoverageModel:
    """Max-k-coverage ILP over ``instance``.

    Variables ``e{x}`` (element covered, objective 1) come first, then
    ``s{i}`` (set selected, objective 0). One ``cover{x}`` row
    ``e_x - sum(s_i for sets containing x) <= 0`` per element and a single
    ``cardinality`` row ``sum(s_i) <= k``.
    """

    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    validate_instance(instance)

    variables: list[Variable] = []
    element_vars: dict[int, int] = {}
    for e in instance.ground:
        element_vars[e] = len(variables)
        variables.append(Variable(name=f"e{e}", objective=1.0))

    containment: dict[int, list[int]] = {e: [] for e in instance.ground}
    set_vars: list[int] = []
    for i, items in enumerate(instance.sets):
        for e in items:
            containment[e].append(i)
        set_vars.append(len(variables))
        variables.append(Variable(name=f"s{i}", objective=0.0))

    constraints: list[Constraint] = []
    for e in instance.ground:
        terms = [(element_vars[e], 1.0)]
        terms.extend((set_vars[i], -1.0) for i in containment[e])
        constraints.append(Constraint(name=f"cover{e}", terms=tuple(terms), sense="<=", rhs=0.0))
    constraints.append(
        Constraint(
            name="cardinality",
            terms=tuple((v, 1.0) for v in set_vars),
            sense="<=",
            rhs=float(k),
        )
    )

    return CoverageModel(
        name="maxcover",
        sense="maximize",
        k=int(k),
        variables=tuple(variables),
        constraints=tuple(constraints),
        element_vars=tuple(element_vars[e] for e in instance.ground),
        set_vars=tuple(set_vars),
        containment=MappingProxyType({e: tuple(v) for e, v in containment.items()}),
    )


def _row_holds(lhs: float, sense: str, rhs: float) -> bool:
    if sense == "<=":
        return lhs <= rhs + EPS
    if sense == ">=":
        return lhs >= rhs - EPS
    if sense == "==":
        return abs(lhs - rhs) <= EPS
    raise ValueError(f"unknown constraint sense: {sense}")


def evaluate_assignment(model: CoverageModel, assignment: Sequence[bool]) -> tuple[bool, float]:
    """Return ``(feasible, objective)`` of a 0/1 assignment in variable order."""

    if len(assignment) != model.n_vars:
        raise ValueError(f"assignment has {len(assignment)} values, model has {model.n_vars} variables")

    objective = sum(var.objective for var, on in zip(model.variables, assignment) if on)
    for con in model.constraints:
        lhs = sum(coef for idx, coef in con.terms if assignment[idx])
        if not _row_holds(lhs, con.sense, con.rhs):
            return False, float(objective)
    return True, float(objective)
