from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import OmegaConf

from maxcover.solve import SOLVER_MODULES

DEFAULTS: dict[str, Any] = {
    "generate": {
        "elements": 20,
        "sets": 30,
        "max_size": None,
        "seed": None,
        "max_attempts": None,
    },
    "solve": {
        "solver": "pulp_cbc",
        "threads": 1,
        "time_limit_sec": None,
        "msg": 0,
        "verify": True,
        "lp_path": None,
    },
    "solvers": dict(SOLVER_MODULES),
    "sweep": {
        "ks": [0, 1, 2, 3, 4, 5],
        "output_root": "outputs/sweeps",
        "run_id_prefix": "sweep",
        "generate_plots": True,
    },
}


def _set_nested(config: dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    cur = config
    for part in parts[:-1]:
        node = cur.get(part)
        if not isinstance(node, dict):
            node = {}
            cur[part] = node
        cur = node
    cur[parts[-1]] = value


def _apply_overrides(config: dict[str, Any], overrides: dict[str, Any] | None) -> dict[str, Any]:
    if not overrides:
        return config
    for key, value in overrides.items():
        if value is None:
            continue
        _set_nested(config, key, value)
    return config


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Defaults, then the YAML file if it exists, then dotted ``overrides``."""

    cfg_obj = OmegaConf.create(DEFAULTS)
    if config_path is not None and Path(config_path).exists():
        cfg_obj = OmegaConf.merge(cfg_obj, OmegaConf.load(str(config_path)))
    cfg = OmegaConf.to_container(cfg_obj, resolve=True)
    assert isinstance(cfg, dict)
    return _apply_overrides(cfg, overrides)
