from __future__ import annotations

import pytest

from maxcover.types import Instance


@pytest.fixture
def chain_instance() -> Instance:
    return Instance(ground=(0, 1, 2, 3), sets=((0, 1), (1, 2), (2, 3)))


@pytest.fixture
def singletons_instance() -> Instance:
    return Instance(ground=(0, 1, 2), sets=((0,), (1,), (2,)))


@pytest.fixture
def orphan_instance() -> Instance:
    # element 2 is in no set
    return Instance(ground=(0, 1, 2), sets=((0,), (0, 1)))
