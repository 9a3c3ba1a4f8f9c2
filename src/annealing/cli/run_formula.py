"""Anneal the reference cubic-formula problem.

Usage:
    python -m annealing.cli.run_formula --seed 7
    python -m annealing.cli.run_formula --schedule linear --temperature 50 --constant 0.5
    python -m annealing.cli.run_formula --config run.yaml --max-iterations 200

Outputs JSON with the solution and run statistics to stdout.
"""

from __future__ import annotations

import argparse
import json
from typing import Any


def _overrides(args: argparse.Namespace, base_kind: str) -> dict[str, Any]:
    """Collect the flags the user actually passed as a nested config dict."""
    schedule = {
        "kind": args.schedule,
        "temperature": args.temperature,
        "constant": args.constant,
        "stopping": args.stopping,
    }
    # Switching kind without a constant falls back to the new kind's default.
    reset_constant = args.schedule not in (None, base_kind) and args.constant is None
    acceptance = {"kind": args.acceptance, "constant": args.boltzmann_constant}
    run = {
        "seed": args.seed,
        "scan_limit": args.scan_limit,
        "stop_at_fitness": args.stop_at_fitness,
        "on_exhausted": args.on_exhausted,
        "log_level": args.log_level,
    }
    if args.max_iterations is not None:
        run["termination"] = "max_iterations"
        run["max_iterations"] = args.max_iterations
    if args.return_current:
        run["return_best"] = False

    out: dict[str, Any] = {}
    for section, values in (("schedule", schedule), ("acceptance", acceptance), ("run", run)):
        kept = {k: v for k, v in values.items() if v is not None}
        if section == "schedule" and reset_constant:
            kept["constant"] = None
        if kept:
            out[section] = kept
    return out


def main(argv: list[str] | None = None) -> int:
    """Run the reference problem.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = argparse.ArgumentParser(
        description="Maximise x^3 - 60x^2 + 900x + 100 over 5-bit integers by simulated annealing"
    )
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--schedule", choices=["linear", "geometric"], default=None)
    parser.add_argument("--temperature", type=float, default=None, help="Initial temperature")
    parser.add_argument(
        "--constant", type=float, default=None, help="Linear decrement or geometric factor"
    )
    parser.add_argument("--stopping", type=float, default=None, help="Stopping temperature")
    parser.add_argument("--acceptance", choices=["boltzmann", "never"], default=None)
    parser.add_argument("--boltzmann-constant", type=float, default=None)
    parser.add_argument("--max-iterations", type=int, default=None, help="Fixed iteration budget")
    parser.add_argument("--stop-at-fitness", type=float, default=None)
    parser.add_argument("--on-exhausted", choices=["terminate", "cool"], default=None)
    parser.add_argument("--scan-limit", type=int, default=None, help="Neighbours per iteration")
    parser.add_argument("--return-current", action="store_true", help="Return the working solution")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARN", "ERROR"], default=None)
    parser.add_argument("--history", action="store_true", help="Include per-iteration records")

    args = parser.parse_args(argv)

    import numpy as np

    from ..core.config import (
        build_acceptance,
        build_run_kwargs,
        build_schedule,
        default_config,
        load_config,
        merge_config,
    )
    from ..core.engine import anneal
    from ..core.logging import set_log_level
    from ..problems.formula import FormulaSolution, formula

    base = load_config(args.config) if args.config else default_config()
    cfg = merge_config(base, _overrides(args, base.schedule.kind))
    if cfg.acceptance.kind == "never" and cfg.run.scan_limit is None:
        # The neighbour stream is endless and never_accept rejects ties.
        parser.error("--acceptance never requires --scan-limit")
    set_log_level(cfg.run.log_level)

    run_kwargs = build_run_kwargs(cfg.run)
    rng = np.random.default_rng(run_kwargs.pop("rng"))

    result = anneal(
        FormulaSolution.random(rng),
        build_schedule(cfg.schedule),
        build_acceptance(cfg.acceptance),
        rng=rng,
        record_history=args.history,
        **run_kwargs,
    )

    output: dict[str, Any] = {
        "x": result.solution.x,
        "value": formula(float(result.solution.x)),
        **result.summary(),
        "config": cfg.model_dump(mode="json"),
    }
    if args.history:
        output["history"] = [r.to_dict() for r in result.history]

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
