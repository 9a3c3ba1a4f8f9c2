"""Reference problems exercising the engine contracts."""

from .formula import MAX_X, OPTIMUM_X, FormulaSolution, formula

__all__ = ["FormulaSolution", "MAX_X", "OPTIMUM_X", "formula"]
