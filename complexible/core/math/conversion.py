"""
Conversion — Rectangular ↔ Polar

Двунаправленное отображение между декартовой (real, imaginary) и полярной
(magnitude, angle) формами комплексного числа.

ФОРМУЛЫ:
    magnitude = sqrt(re² + im²)         (через math.hypot, без переполнения)
    angle     = atan2(im, re)           (главное значение в (−π, π])
    re        = magnitude × cos(angle)
    im        = magnitude × sin(angle)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude >= 0
2. magnitude == 0 → angle == 0 (точка в начале координат не имеет направления)
3. polar_to_rectangular(rectangular_to_polar(z)) ≈ z в пределах 1e-9 × max(1, |z|)
4. Модуль, не представимый конечным float, → DomainError; ln|z| и arg(z)
   при этом остаются вычислимыми (log_magnitude, principal_argument)
"""

import math

from complexible.core.math.exceptions import DomainError
from complexible.core.math.numerical_safeguards import (
    ensure_finite_result,
    validate_finite,
)


def principal_argument(real: float, imaginary: float) -> float:
    """
    Главное значение аргумента в (−π, π].

    Не зависит от модуля, поэтому определено и для компонент,
    модуль которых не представим в float.

    Examples:
        >>> principal_argument(0.0, 0.0)
        0.0
        >>> principal_argument(-1.0, -0.0) == math.pi
        True
    """
    validate_finite(real, "real")
    validate_finite(imaginary, "imaginary")

    if real == 0.0 and imaginary == 0.0:
        # atan2(±0.0, −0.0) даёт ±π; для нуля угол по соглашению 0
        return 0.0

    angle = math.atan2(imaginary, real)

    # atan2 возвращает −π для (x < 0, −0.0), главное значение +π
    if angle == -math.pi:
        return math.pi
    return angle


def magnitude_rectangular(real: float, imaginary: float) -> float:
    """
    Модуль |z|.

    Raises:
        DomainError: Если |z| > DBL_MAX при конечных компонентах
            (например, (1.7e308, 1.7e308))
    """
    validate_finite(real, "real")
    validate_finite(imaginary, "imaginary")

    magnitude = math.hypot(real, imaginary)
    ensure_finite_result("magnitude", magnitude)
    return magnitude


def log_magnitude(real: float, imaginary: float) -> float:
    """
    ln|z| без переполнения.

    Если hypot переполняется, модуль считается в масштабе
    s = max(|re|, |im|):  ln|z| = ln(s) + ln(hypot(re/s, im/s)).

    Raises:
        DomainError: Если z == 0

    Examples:
        >>> abs(log_magnitude(1.7e308, 1.7e308) - 710.0734105) < 1e-6
        True
    """
    validate_finite(real, "real")
    validate_finite(imaginary, "imaginary")

    if real == 0.0 and imaginary == 0.0:
        raise DomainError("Logarithm of zero is undefined")

    magnitude = math.hypot(real, imaginary)
    if math.isfinite(magnitude):
        return math.log(magnitude)

    scale = max(abs(real), abs(imaginary))
    return math.log(scale) + math.log(math.hypot(real / scale, imaginary / scale))


def rectangular_to_polar(real: float, imaginary: float) -> tuple[float, float]:
    """
    Конверсия декартовой формы в полярную.

    Args:
        real: Действительная часть
        imaginary: Мнимая часть

    Returns:
        (magnitude, angle_rad): модуль и главное значение аргумента в (−π, π]

    Raises:
        DomainError: Если модуль не представим конечным float

    Examples:
        >>> rectangular_to_polar(3.0, 4.0)
        (5.0, 0.9272952180016122)
        >>> rectangular_to_polar(0.0, 0.0)
        (0.0, 0.0)
        >>> rectangular_to_polar(-1.0, -0.0)[1] == math.pi
        True
    """
    magnitude = magnitude_rectangular(real, imaginary)

    if magnitude == 0.0:
        return (0.0, 0.0)

    return (magnitude, principal_argument(real, imaginary))


def polar_to_rectangular(magnitude: float, angle_rad: float) -> tuple[float, float]:
    """
    Конверсия полярной формы в декартову.

    Args:
        magnitude: Модуль (>= 0)
        angle_rad: Угол в радианах (любой, не обязательно нормализованный)

    Returns:
        (real, imaginary)

    Raises:
        ValueError: Если magnitude < 0 или аргументы NaN/Inf
    """
    validate_finite(magnitude, "magnitude")
    validate_finite(angle_rad, "angle")

    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")

    if magnitude == 0.0:
        return (0.0, 0.0)

    real = magnitude * math.cos(angle_rad)
    imaginary = magnitude * math.sin(angle_rad)

    ensure_finite_result("polar_to_rectangular", real, imaginary)
    return (real, imaginary)
