"""
Domain models and value objects.

Contains the immutable value types Angle, RectangularForm, PolarForm.
"""

from complexible.core.domain.angle import Angle, AngleUnit
from complexible.core.domain.complex_number import (
    PolarForm,
    RectangularForm,
    from_cartesian,
    from_dict,
    from_polar,
    from_real,
)

__all__ = [
    # Angle
    "Angle",
    "AngleUnit",
    # Complex number forms
    "RectangularForm",
    "PolarForm",
    # Constructors
    "from_real",
    "from_cartesian",
    "from_polar",
    "from_dict",
]
