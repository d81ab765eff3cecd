from __future__ import annotations

import pytest

from maxcover.errors import SolverFailure
from maxcover.extract import coverage_of, extract_solution
from maxcover.model import build_model


def _assignment(model, elements, sets):
    bits = [False] * model.n_vars
    for e in elements:
        bits[model.element_vars[e]] = True
    for i in sets:
        bits[model.set_vars[i]] = True
    return tuple(bits)


def test_selected_indices_in_ascending_order(chain_instance):
    model = build_model(chain_instance, 2)
    bits = _assignment(model, [0, 1, 2, 3], [2, 0])
    solution = extract_solution(model, bits, 4.0)
    assert solution.sol == (0, 2)
    assert solution.objective == 4.0


def test_objective_copied_verbatim(chain_instance):
    model = build_model(chain_instance, 2)
    bits = _assignment(model, [0, 1], [0])
    assert extract_solution(model, bits, 1.9999999).objective == 1.9999999


def test_verify_accepts_consistent_solution(chain_instance):
    model = build_model(chain_instance, 2)
    bits = _assignment(model, [0, 1, 2, 3], [0, 2])
    solution = extract_solution(model, bits, 4.0, instance=chain_instance, verify=True)
    assert solution.sol == (0, 2)


def test_verify_rejects_wrong_objective(chain_instance):
    model = build_model(chain_instance, 2)
    bits = _assignment(model, [0, 1], [0])
    with pytest.raises(SolverFailure):
        extract_solution(model, bits, 3.0, instance=chain_instance, verify=True)


def test_verify_rejects_too_many_sets(chain_instance):
    model = build_model(chain_instance, 1)
    bits = _assignment(model, [0, 1, 2, 3], [0, 2])
    with pytest.raises(SolverFailure):
        extract_solution(model, bits, 4.0, instance=chain_instance, verify=True)


def test_verify_requires_instance(chain_instance):
    model = build_model(chain_instance, 1)
    with pytest.raises(ValueError):
        extract_solution(model, (False,) * model.n_vars, 0.0, verify=True)


def test_coverage_of(chain_instance):
    assert coverage_of(chain_instance, []) == 0
    assert coverage_of(chain_instance, [0, 1]) == 3
    assert coverage_of(chain_instance, [0, 1, 2]) == 4
