"""Core constants for the annealing engine.

This module defines package-wide defaults:
- Acceptance-function constants
- Exponent guard for the Boltzmann criterion
- Default cooling parameters used by config and CLI
"""

from __future__ import annotations

ENGINE_VERSION = "0.1.0"

# Acceptance
DEFAULT_BOLTZMANN_CONSTANT = 1.0
NEVER_ACCEPT_SCORE = -1.0
# math.exp overflows just above 709.78
MAX_EXPONENT = 709.0

# Cooling defaults (geometric, the most common choice; factors in 0.5-0.99 work well)
DEFAULT_INITIAL_TEMPERATURE = 800.0
DEFAULT_COOLING_FACTOR = 0.99
DEFAULT_LINEAR_DECREMENT = 1.0
DEFAULT_STOPPING_TEMPERATURE = 0.001
