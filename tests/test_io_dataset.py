from __future__ import annotations

import json

import pytest

from maxcover.errors import MalformedInstance
from maxcover.generator import generate_instance
from maxcover.io_dataset import read_instance, read_solution, write_instance, write_solution
from maxcover.types import Solution


def test_instance_file_layout(tmp_path):
    inst = generate_instance(5, 4, seed=2)
    path = write_instance(inst, tmp_path / "nested" / "inst.json")
    raw = json.loads(path.read_text())
    assert raw["ground"] == [0, 1, 2, 3, 4]
    assert len(raw["sets"]) == 4
    assert read_instance(path) == inst


def test_read_normalises_member_order(tmp_path):
    path = tmp_path / "inst.json"
    path.write_text(json.dumps({"ground": [2, 0, 1], "sets": [[1, 0], [2]]}))
    inst = read_instance(path)
    assert inst.ground == (0, 1, 2)
    assert inst.sets == ((0, 1), (2,))


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        json.dumps([1, 2]),
        json.dumps({"ground": [0, 1]}),
        json.dumps({"ground": [0, 1], "sets": [[0], [0]]}),
        json.dumps({"ground": [0, 1], "sets": [[0, 5]]}),
        json.dumps({"ground": [0, 1], "sets": [[]]}),
        json.dumps({"ground": [0, 1], "sets": [0]}),
    ],
)
def test_malformed_files(tmp_path, payload):
    path = tmp_path / "bad.json"
    path.write_text(payload)
    with pytest.raises(MalformedInstance):
        read_instance(path)


def test_solution_file(tmp_path):
    path = write_solution(Solution(objective=4.0, sol=(0, 2)), tmp_path / "sol.json")
    text = path.read_text()
    assert json.loads(text) == {"objective": 4.0, "sol": [0, 2]}
    assert "\n  " in text
    assert read_solution(path) == Solution(objective=4.0, sol=(0, 2))
