"""Smoke tests for the run_formula CLI."""

import json

import pytest

from annealing.cli import run_formula_main
from annealing.core.config import default_config, merge_config, save_config


def _run(capsys, argv):
    assert run_formula_main(argv) == 0
    return json.loads(capsys.readouterr().out)


def test_cli_default_schedule_finds_optimum(capsys):
    out = _run(
        capsys,
        ["--seed", "3", "--temperature", "100", "--constant", "0.9", "--stopping", "0.01"],
    )
    assert out["x"] == 10
    assert out["value"] == 4100.0
    assert out["reason"] == "schedule_stopped"
    assert out["config"]["schedule"]["kind"] == "geometric"


def test_cli_iteration_budget_and_history(capsys):
    out = _run(capsys, ["--seed", "1", "--max-iterations", "5", "--history"])
    assert out["iterations"] <= 5
    assert len(out["history"]) == out["iterations"]
    assert out["config"]["run"]["termination"] == "max_iterations"


def test_cli_switching_schedule_uses_kind_default_constant(capsys):
    out = _run(capsys, ["--schedule", "linear", "--seed", "1", "--max-iterations", "3"])
    assert out["config"]["schedule"]["kind"] == "linear"
    assert out["config"]["schedule"]["constant"] == 1.0

    out = _run(
        capsys,
        ["--schedule", "linear", "--constant", "4", "--seed", "1", "--max-iterations", "3"],
    )
    assert out["config"]["schedule"]["constant"] == 4.0


def test_cli_reads_yaml_config(tmp_path, capsys):
    cfg = merge_config(
        default_config(),
        {
            "schedule": {"kind": "linear", "temperature": 20.0, "constant": 1.0, "stopping": 0.0},
            "run": {"seed": 8, "log_level": "ERROR"},
        },
    )
    path = tmp_path / "run.yaml"
    save_config(cfg, path)

    out = _run(capsys, ["--config", str(path), "--return-current"])
    assert out["iterations"] <= 20
    assert out["config"]["schedule"]["kind"] == "linear"
    assert out["config"]["run"]["return_best"] is False


def test_cli_never_accept_requires_scan_limit(capsys):
    with pytest.raises(SystemExit):
        run_formula_main(["--acceptance", "never"])

    out = _run(capsys, ["--acceptance", "never", "--scan-limit", "40", "--seed", "2"])
    assert out["reason"] in {"neighbours_exhausted", "schedule_stopped"}
