"""CLI modules for running the annealer.

Note: avoid importing submodules at import-time. This keeps
`python -m annealing.cli.<cmd>` free of `runpy` warnings.
"""

from __future__ import annotations


def run_formula_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `annealing.cli.run_formula.main`."""

    from .run_formula import main

    return main(argv)


__all__ = ["run_formula_main"]
