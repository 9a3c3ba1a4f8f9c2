"""Generic simulated annealing.

Supply a solution (fitness + neighbours), a cooling schedule and an
acceptance function, then call ``anneal`` or ``simulated_annealing``.
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .core.constants import ENGINE_VERSION

__version__ = ENGINE_VERSION
__all__ = list(_core_all) + ["__version__"]
