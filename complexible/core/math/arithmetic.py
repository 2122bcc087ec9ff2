"""
Arithmetic — элементарные операции над комплексными числами

Два пути вычисления:
- Декартов: сложение/вычитание покомпонентно, умножение (ac−bd, ad+bc),
  деление по алгоритму Смита
- Полярный: умножение m1×m2 ∠ (a1+a2), деление m1/m2 ∠ (a1−a2),
  углы нормализуются к (−π, π]

Оба пути дают равные результаты в пределах EPS_COMPLEX_COMPARE.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Делитель с нулевым модулем → DivisionByZero (никогда не inf/NaN)
2. Переполнение результата → DomainError
3. Модуль полярного результата всегда >= 0
"""

import math

from complexible.core.math.exceptions import DivisionByZero
from complexible.core.math.numerical_safeguards import (
    ensure_finite_result,
    wrap_angle,
)
from complexible.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# ДЕКАРТОВА ФОРМА
# =============================================================================


def add_rectangular(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """(a + bi) + (c + di) = (a+c) + (b+d)i"""
    real, imaginary = a + c, b + d
    ensure_finite_result("add", real, imaginary)
    return (real, imaginary)


def subtract_rectangular(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """(a + bi) − (c + di) = (a−c) + (b−d)i"""
    real, imaginary = a - c, b - d
    ensure_finite_result("subtract", real, imaginary)
    return (real, imaginary)


def multiply_rectangular(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """
    Произведение в декартовой форме.

    (a + bi)(c + di) = (ac − bd) + (ad + bc)i

    Examples:
        >>> multiply_rectangular(1.0, 0.0, 0.0, 1.0)
        (0.0, 1.0)
    """
    real = a * c - b * d
    imaginary = a * d + b * c
    ensure_finite_result("multiply", real, imaginary)
    return (real, imaginary)


def scale_rectangular(a: float, b: float, k: float) -> tuple[float, float]:
    """Умножение на действительный скаляр: (ka, kb)."""
    real, imaginary = a * k, b * k
    ensure_finite_result("multiply_scalar", real, imaginary)
    return (real, imaginary)


def divide_rectangular(a: float, b: float, c: float, d: float) -> tuple[float, float]:
    """
    Частное в декартовой форме (алгоритм Смита).

    Эквивалентно ((ac+bd)/(c²+d²), (bc−ad)/(c²+d²)), но знаменатель c²+d²
    не вычисляется явно: для |c| или |d| порядка 1e-200 или 1e200 он
    переполнился бы или обнулился.

    Args:
        a, b: Делимое
        c, d: Делитель

    Returns:
        (real, imaginary) частного

    Raises:
        DivisionByZero: Если c == 0 и d == 0

    Examples:
        >>> divide_rectangular(0.0, 0.0, 1.0, 1.0)
        (0.0, 0.0)
        >>> divide_rectangular(1.0, 1.0, 1.0, 1.0)
        (1.0, 0.0)
    """
    if c == 0.0 and d == 0.0:
        logger.debug("divide: zero divisor for dividend (%r, %r)", a, b)
        raise DivisionByZero(f"Division by zero: ({a!r}, {b!r}) / (0, 0)")

    if abs(c) >= abs(d):
        ratio = d / c
        denom = c + d * ratio
        real = (a + b * ratio) / denom
        imaginary = (b - a * ratio) / denom
    else:
        ratio = c / d
        denom = c * ratio + d
        real = (a * ratio + b) / denom
        imaginary = (b * ratio - a) / denom

    ensure_finite_result("divide", real, imaginary)
    return (real + 0.0, imaginary + 0.0)


def conjugate_rectangular(a: float, b: float) -> tuple[float, float]:
    """Сопряжённое: a − bi."""
    return (a, -b)


# =============================================================================
# ПОЛЯРНАЯ ФОРМА
# =============================================================================


def multiply_polar(
    m1: float, a1: float, m2: float, a2: float
) -> tuple[float, float]:
    """
    Произведение в полярной форме.

    m = m1 × m2, angle = normalized(a1 + a2)

    Returns:
        (magnitude, angle_rad); для нулевого модуля угол 0
    """
    magnitude = m1 * m2
    ensure_finite_result("multiply", magnitude)

    if magnitude == 0.0:
        return (0.0, 0.0)

    return (magnitude, wrap_angle(a1 + a2))


def scale_polar(m: float, angle_rad: float, k: float) -> tuple[float, float]:
    """
    Умножение на действительный скаляр в полярной форме.

    Модуль масштабируется на |k|; отрицательный k поворачивает угол на π,
    чтобы модуль оставался неотрицательным.
    """
    magnitude = m * abs(k)
    ensure_finite_result("multiply_scalar", magnitude)

    if magnitude == 0.0:
        return (0.0, 0.0)

    if k < 0:
        return (magnitude, wrap_angle(angle_rad + math.pi))
    return (magnitude, angle_rad)


def divide_polar(m1: float, a1: float, m2: float, a2: float) -> tuple[float, float]:
    """
    Частное в полярной форме.

    m = m1 / m2, angle = normalized(a1 − a2)

    Raises:
        DivisionByZero: Если m2 == 0
    """
    if m2 == 0.0:
        logger.debug("divide: zero divisor magnitude for dividend magnitude %r", m1)
        raise DivisionByZero(f"Division by zero: divisor magnitude is 0 (dividend magnitude {m1!r})")

    magnitude = m1 / m2
    ensure_finite_result("divide", magnitude)

    if magnitude == 0.0:
        return (0.0, 0.0)

    return (magnitude, wrap_angle(a1 - a2))
