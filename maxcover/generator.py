from __future__ import annotations

import random
from typing import Sequence

from maxcover.errors import GenerationExhausted
from maxcover.types import Instance


def sample_subset(ground: Sequence[int], size: int, rng: random.Random) -> frozenset[int]:
    """Draw ``size`` distinct elements of ``ground`` uniformly, without replacement."""

    if size < 1 or size > len(ground):
        raise ValueError(f"size must be within [1, {len(ground)}], got {size}")
    return frozenset(rng.sample(list(ground), size))


def count_possible_subsets(num_elements: int, max_size: int, cap: int | None = None) -> int:
    """Number of non-empty subsets of size <= ``max_size``.

    With ``cap`` the count stops once it reaches ``cap`` and the returned value
    is only a lower bound.
    """

    if max_size >= num_elements:
        return 2**num_elements - 1

    total = 0
    binom = 1
    for size in range(1, max_size + 1):
        binom = binom * (num_elements - size + 1) // size
        total += binom
        if cap is not None and total >= cap:
            break
    return total


def _effective_max_size(num_elements: int, max_size: int | None) -> int:
    if max_size is None:
        return num_elements
    if max_size < 1:
        raise ValueError(f"max_size must be >= 1, got {max_size}")
    return min(int(max_size), num_elements)


def generate_instance(
    num_elements: int,
    num_sets: int,
    max_size: int | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
    max_attempts: int | None = None,
) -> Instance:
    """Random instance with ``num_sets`` pairwise distinct, non-empty subsets.

    Each draw picks a size uniformly from ``[1, max_size]`` (``max_size``
    defaults to ``num_elements``) and then a subset of that size. Draws that
    repeat an accepted subset are discarded. Raises ``GenerationExhausted`` if
    the size range cannot hold ``num_sets`` distinct subsets, or if
    ``max_attempts`` draws do not fill the family.
    """

    if num_elements < 1:
        raise ValueError(f"num_elements must be >= 1, got {num_elements}")
    if num_sets < 0:
        raise ValueError(f"num_sets must be >= 0, got {num_sets}")

    upper = _effective_max_size(num_elements, max_size)
    possible = count_possible_subsets(num_elements, upper, cap=num_sets)
    if possible < num_sets:
        raise GenerationExhausted(
            f"only {possible} distinct subsets of size 1..{upper} exist over "
            f"{num_elements} elements, {num_sets} requested"
        )

    if rng is None:
        rng = random.Random(seed)
    if max_attempts is None:
        max_attempts = max(10_000, num_sets * 100)

    ground = tuple(range(num_elements))
    accepted: set[frozenset[int]] = set()

    attempts = 0
    while len(accepted) < num_sets:
        if attempts >= max_attempts:
            raise GenerationExhausted(
                f"accepted {len(accepted)}/{num_sets} distinct subsets after {attempts} attempts"
            )
        size = rng.randint(1, upper)
        subset = sample_subset(ground, size, rng)
        if subset not in accepted:
            accepted.add(subset)
        attempts += 1

    sets = tuple(sorted(tuple(sorted(s)) for s in accepted))
    return Instance(ground=ground, sets=sets)
