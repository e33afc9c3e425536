"""
Exceptions raised by PyFlowTex.

Author: B.G.
"""


class ParameterValidationError(ValueError):
    """Invalid generation or filter parameter, raised before any computation."""


class ComputationError(RuntimeError):
    """A produced buffer holds non-finite or out-of-range values."""


__all__ = ["ParameterValidationError", "ComputationError"]
