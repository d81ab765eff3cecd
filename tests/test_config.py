from __future__ import annotations

from maxcover.config import DEFAULTS, load_config


def test_defaults_without_file(tmp_path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg["solve"]["solver"] == "pulp_cbc"
    assert cfg["solve"]["threads"] == 1
    assert cfg["solve"]["time_limit_sec"] is None
    assert cfg["solvers"] == DEFAULTS["solvers"]


def test_yaml_file_is_merged(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("solve:\n  solver: bruteforce\n  threads: 4\nsweep:\n  ks: [1, 2]\n")
    cfg = load_config(path)
    assert cfg["solve"]["solver"] == "bruteforce"
    assert cfg["solve"]["threads"] == 4
    assert cfg["solve"]["verify"] is True
    assert cfg["sweep"]["ks"] == [1, 2]


def test_overrides_skip_none(tmp_path):
    cfg = load_config(
        None,
        overrides={"solve.threads": 8, "solve.solver": None, "extra.flag": True},
    )
    assert cfg["solve"]["threads"] == 8
    assert cfg["solve"]["solver"] == "pulp_cbc"
    assert cfg["extra"] == {"flag": True}


def test_defaults_are_not_mutated():
    load_config(None, overrides={"solve.threads": 3})
    assert DEFAULTS["solve"]["threads"] == 1
