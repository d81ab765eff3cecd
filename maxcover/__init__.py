from __future__ import annotations

from maxcover.errors import (
    GenerationExhausted,
    InfeasibleModel,
    MalformedInstance,
    MaxCoverError,
    SolverFailure,
)
from maxcover.extract import extract_solution
from maxcover.generator import generate_instance, sample_subset
from maxcover.model import build_model, validate_instance
from maxcover.solve import solve_instance
from maxcover.types import CoverageModel, Instance, MipResult, Solution

__all__ = [
    "CoverageModel",
    "GenerationExhausted",
    "InfeasibleModel",
    "Instance",
    "MalformedInstance",
    "MaxCoverError",
    "MipResult",
    "Solution",
    "SolverFailure",
    "build_model",
    "extract_solution",
    "generate_instance",
    "sample_subset",
    "solve_instance",
    "validate_instance",
]

__version__ = "0.1.0"
