from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from maxcover.errors import MalformedInstance
from maxcover.model import validate_instance
from maxcover.types import Instance, Solution


def instance_to_dict(instance: Instance) -> dict[str, Any]:
    return {
        "ground": [int(e) for e in instance.ground],
        "sets": [[int(e) for e in items] for items in instance.sets],
    }


def instance_from_dict(raw: Any) -> Instance:
    if not isinstance(raw, dict) or "ground" not in raw or "sets" not in raw:
        raise MalformedInstance("instance must be an object with 'ground' and 'sets'")
    if not isinstance(raw["ground"], list) or not isinstance(raw["sets"], list):
        raise MalformedInstance("'ground' and 'sets' must be lists")
    for idx, items in enumerate(raw["sets"]):
        if not isinstance(items, list):
            raise MalformedInstance(f"set {idx} must be a list")

    instance = Instance(
        ground=tuple(raw["ground"]),
        sets=tuple(tuple(items) for items in raw["sets"]),
    )
    validate_instance(instance)
    return Instance(
        ground=tuple(sorted(instance.ground)),
        sets=tuple(tuple(sorted(items)) for items in instance.sets),
    )


def read_instance(path: str | Path) -> Instance:
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedInstance(f"Invalid instance JSON: {p}: {exc}") from exc
    return instance_from_dict(raw)


def write_instance(instance: Instance, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(instance_to_dict(instance)), encoding="utf-8")
    return p


def solution_to_dict(solution: Solution) -> dict[str, Any]:
    return {"objective": float(solution.objective), "sol": [int(i) for i in solution.sol]}


def read_solution(path: str | Path) -> Solution:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return Solution(objective=float(raw["objective"]), sol=tuple(int(i) for i in raw["sol"]))


def write_solution(solution: Solution, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(solution_to_dict(solution), indent=2) + "\n", encoding="utf-8")
    return p
