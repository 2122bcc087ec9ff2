"""
complexible — complex-number arithmetic core

Two immutable representations (RectangularForm, PolarForm), conversion
between them, arithmetic, and principal-branch transcendental functions.

    >>> from complexible import from_cartesian
    >>> str(from_cartesian(1.0, 0.0).multiply(from_cartesian(0.0, 1.0)))
    '0.0 + 1.0i'
"""

from complexible.core.domain import (
    Angle,
    AngleUnit,
    PolarForm,
    RectangularForm,
    from_cartesian,
    from_dict,
    from_polar,
    from_real,
)
from complexible.core.math.exceptions import (
    ComplexArithmeticError,
    DegenerateLogBase,
    DivisionByZero,
    DomainError,
    InvalidRoot,
)

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "AngleUnit",
    "RectangularForm",
    "PolarForm",
    "from_real",
    "from_cartesian",
    "from_polar",
    "from_dict",
    "ComplexArithmeticError",
    "DivisionByZero",
    "DomainError",
    "DegenerateLogBase",
    "InvalidRoot",
]
