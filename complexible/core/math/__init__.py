"""
Core math modules для complexible

Float-ядра комплексной арифметики с гарантией численной стабильности.
Ядра принимают и возвращают float / tuple[float, float].
"""

# Exceptions
from complexible.core.math.exceptions import (
    ComplexArithmeticError,
    DegenerateLogBase,
    DivisionByZero,
    DomainError,
    InvalidRoot,
)

# Numerical Safeguards
from complexible.core.math.numerical_safeguards import (
    # Epsilon constants
    DEG_TO_RAD,
    EPS_COMPLEX_COMPARE,
    FULL_TURN_DEG,
    FULL_TURN_RAD,
    RAD_TO_DEG,
    # NaN/Inf checks
    ensure_finite_result,
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    components_close,
    # Angles
    angle_distance,
    wrap_angle,
)

# Conversion
from complexible.core.math.conversion import (
    log_magnitude,
    magnitude_rectangular,
    polar_to_rectangular,
    principal_argument,
    rectangular_to_polar,
)

# Arithmetic
from complexible.core.math.arithmetic import (
    add_rectangular,
    conjugate_rectangular,
    divide_polar,
    divide_rectangular,
    multiply_polar,
    multiply_rectangular,
    scale_polar,
    scale_rectangular,
    subtract_rectangular,
)

# Transcendental
from complexible.core.math.transcendental import (
    INTEGER_POWER_MAX_EXPONENT,
    exp_rectangular,
    integral_exponent,
    ln_rectangular,
    log_rectangular,
    nth_roots_polar,
    nth_roots_rectangular,
    power_rectangular,
    validate_root_degree,
)

__all__ = [
    # Exceptions
    "ComplexArithmeticError",
    "DegenerateLogBase",
    "DivisionByZero",
    "DomainError",
    "InvalidRoot",
    # Numerical Safeguards — Constants
    "DEG_TO_RAD",
    "EPS_COMPLEX_COMPARE",
    "FULL_TURN_DEG",
    "FULL_TURN_RAD",
    "RAD_TO_DEG",
    # Numerical Safeguards — NaN/Inf checks
    "ensure_finite_result",
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — Epsilon comparisons
    "components_close",
    # Numerical Safeguards — Angles
    "angle_distance",
    "wrap_angle",
    # Conversion
    "log_magnitude",
    "magnitude_rectangular",
    "polar_to_rectangular",
    "principal_argument",
    "rectangular_to_polar",
    # Arithmetic
    "add_rectangular",
    "conjugate_rectangular",
    "divide_polar",
    "divide_rectangular",
    "multiply_polar",
    "multiply_rectangular",
    "scale_polar",
    "scale_rectangular",
    "subtract_rectangular",
    # Transcendental — Constants
    "INTEGER_POWER_MAX_EXPONENT",
    # Transcendental — Functions
    "exp_rectangular",
    "integral_exponent",
    "ln_rectangular",
    "log_rectangular",
    "nth_roots_polar",
    "nth_roots_rectangular",
    "power_rectangular",
    "validate_root_degree",
]
