"""Core utilities and shared application primitives.

Modules in this package should be framework-agnostic where possible and
focused on configuration, parameter binding, and small reusable helpers.
"""

from .binding import ParameterSpec, TargetKind, bind
from .exceptions import BindingError, MissingParameterError, TypeConversionError

__all__ = [
    "BindingError",
    "MissingParameterError",
    "ParameterSpec",
    "TargetKind",
    "TypeConversionError",
    "bind",
]
