from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

import numpy as np
import pandas as pd

from maxcover.solve import SolverFn, solve_instance
from maxcover.types import Instance


SWEEP_COLUMNS = [
    "k",
    "objective",
    "selected_count",
    "selected_json",
    "coverage_ratio",
    "runtime_sec",
    "solver",
    "solver_status",
]


def run_k_sweep(
    instance: Instance,
    ks: Iterable[int],
    solver: str | SolverFn = "pulp_cbc",
    **solver_params: Any,
) -> pd.DataFrame:
    """Solve ``instance`` once per budget in ``ks``, one row per k."""

    rows: list[dict[str, Any]] = []
    for k in sorted({int(k) for k in ks}):
        solution, result = solve_instance(instance, k, solver=solver, **solver_params)
        n_elements = instance.n_elements
        rows.append(
            {
                "k": k,
                "objective": float(solution.objective),
                "selected_count": len(solution.sol),
                "selected_json": json.dumps([int(i) for i in solution.sol]),
                "coverage_ratio": float(solution.objective) / n_elements if n_elements else 0.0,
                "runtime_sec": float(result.runtime_sec),
                "solver": str(result.meta.get("solver", solver if isinstance(solver, str) else "custom")),
                "solver_status": result.status,
            }
        )
    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def is_monotone(sweep_df: pd.DataFrame, tol: float = 1e-6) -> bool:
    if len(sweep_df) < 2:
        return True
    values = sweep_df.sort_values("k")["objective"].to_numpy(dtype=float)
    return bool(np.all(np.diff(values) >= -tol))


def plot_coverage_curve(sweep_df: pd.DataFrame, path: str | Path) -> str:
    import matplotlib

    matplotlib.use("Agg")

    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = sweep_df.sort_values("k")
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(df["k"], df["objective"], marker="o")
    ax.set_title("Max k-Coverage: Optimal Coverage vs k")
    ax.set_xlabel("k")
    ax.set_ylabel("covered elements")
    ax.grid(alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return str(path)


def write_sweep(sweep_df: pd.DataFrame, out_dir: str | Path, with_plots: bool = True) -> list[str]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = [str(out / "sweep.csv")]
    sweep_df.to_csv(out / "sweep.csv", index=False)
    if with_plots and not sweep_df.empty:
        paths.append(plot_coverage_curve(sweep_df, out / "coverage_vs_k.png"))
    return paths


def sweep_run_dir(output_root: str | Path, prefix: str = "sweep") -> Path:
    return Path(output_root) / f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
