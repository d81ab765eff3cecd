from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Instance:
    ground: tuple[int, ...]
    sets: tuple[tuple[int, ...], ...]

    @property
    def n_elements(self) -> int:
        return len(self.ground)

    @property
    def n_sets(self) -> int:
        return len(self.sets)


@dataclass(frozen=True)
class Solution:
    objective: float
    sol: tuple[int, ...]


@dataclass(frozen=True)
class Variable:
    name: str
    objective: float
    kind: str = "binary"


@dataclass(frozen=True)
class Constraint:
    """Linear row ``sum(coef * var) <sense> rhs`` over variable indices."""

    name: str
    terms: tuple[tuple[int, float], ...]
    sense: str
    rhs: float


@dataclass(frozen=True)
class CoverageModel:
    name: str
    sense: str
    k: int
    variables: tuple[Variable, ...]
    constraints: tuple[Constraint, ...]
    element_vars: tuple[int, ...]
    set_vars: tuple[int, ...]
    containment: Mapping[int, tuple[int, ...]]

    @property
    def n_vars(self) -> int:
        return len(self.variables)

    @property
    def n_constraints(self) -> int:
        return len(self.constraints)


@dataclass(frozen=True)
class MipResult:
    status: str
    objective: float
    assignment: tuple[bool, ...]
    runtime_sec: float
    meta: dict[str, Any] = field(default_factory=dict)
