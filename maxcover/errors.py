from __future__ import annotations


class MaxCoverError(Exception):
    """Base class for errors raised by the max-k-coverage core."""


class MalformedInstance(MaxCoverError, ValueError):
    """An instance breaks the ground/sets invariants."""


class GenerationExhausted(MaxCoverError, RuntimeError):
    """Not enough distinct subsets could be drawn for the requested family."""


class InfeasibleModel(MaxCoverError, RuntimeError):
    """The solver proved that the model has no feasible assignment."""


class SolverFailure(MaxCoverError, RuntimeError):
    """The solver stopped without a proven optimum."""
