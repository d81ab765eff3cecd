from __future__ import annotations

import json

import pandas as pd

from maxcover.sweep import SWEEP_COLUMNS, is_monotone, run_k_sweep, sweep_run_dir, write_sweep


def test_sweep_rows(chain_instance):
    df = run_k_sweep(chain_instance, [3, 0, 1, 2, 2], solver="bruteforce")
    assert list(df.columns) == SWEEP_COLUMNS
    assert df["k"].tolist() == [0, 1, 2, 3]
    assert df["objective"].tolist() == [0.0, 2.0, 4.0, 4.0]
    assert json.loads(df.loc[2, "selected_json"]) == [0, 2]
    assert df["coverage_ratio"].tolist() == [0.0, 0.5, 1.0, 1.0]
    assert set(df["solver"]) == {"bruteforce"}
    assert is_monotone(df)


def test_is_monotone_detects_drop():
    df = pd.DataFrame({"k": [0, 1, 2], "objective": [0.0, 3.0, 2.0]})
    assert not is_monotone(df)
    assert is_monotone(df.head(1))


def test_write_sweep(chain_instance, tmp_path):
    df = run_k_sweep(chain_instance, [0, 1, 2], solver="bruteforce")
    paths = write_sweep(df, tmp_path / "no_plots", with_plots=False)
    assert len(paths) == 1
    assert pd.read_csv(paths[0])["objective"].tolist() == [0.0, 2.0, 4.0]

    paths = write_sweep(df, tmp_path / "plots", with_plots=True)
    assert (tmp_path / "plots" / "coverage_vs_k.png").exists()
    assert len(paths) == 2


def test_sweep_run_dir_is_timestamped(tmp_path):
    run_dir = sweep_run_dir(tmp_path, "kscan")
    assert run_dir.parent == tmp_path
    assert run_dir.name.startswith("kscan_")
    assert not run_dir.exists()
