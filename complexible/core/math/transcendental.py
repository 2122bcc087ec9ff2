"""
Transcendental — логарифм, экспонента, степень, корни

Многозначные функции возвращают главное значение (principal branch):
аргумент лежит в (−π, π].

ФОРМУЛЫ:
    ln(z)      = ln|z| + i·arg(z)
    log_b(z)   = ln(z) / ln(b)
    exp(z)     = e^re · (cos(im) + i·sin(im))
    z^w        = exp(w · ln(z))
    z^(1/n)_k  = |z|^(1/n) ∠ (arg(z) + 2πk) / n,   k = 0 .. n−1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ln/log от нуля → DomainError
2. log по основанию 1 → DegenerateLogBase (DivisionByZero и DomainError)
3. 0^w = 0 при Re(w) > 0; иначе DomainError (0^0 тоже DomainError)
4. Целый показатель степени считается бинарным возведением в степень,
   без ln (меньше накопленной ошибки округления)
5. nth_root возвращает все n корней в порядке возрастания k
6. n == 0, n < 0 или нецелое n → InvalidRoot
"""

import math
from numbers import Integral
from typing import Final

from complexible.core.math.arithmetic import divide_rectangular, multiply_rectangular
from complexible.core.math.conversion import log_magnitude, principal_argument
from complexible.core.math.exceptions import DegenerateLogBase, DomainError, InvalidRoot
from complexible.core.math.numerical_safeguards import (
    FULL_TURN_RAD,
    ensure_finite_result,
    validate_finite,
    wrap_angle,
)
from complexible.logging_config import get_logger

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальный |n| для бинарного возведения в целую степень.
# При |n| > порога используется общий путь exp(n · ln(z)).
INTEGER_POWER_MAX_EXPONENT: Final[int] = 1 << 20


# =============================================================================
# ЛОГАРИФМЫ
# =============================================================================


def ln_rectangular(real: float, imaginary: float) -> tuple[float, float]:
    """
    Натуральный логарифм (главная ветвь).

    Args:
        real: Действительная часть z
        imaginary: Мнимая часть z

    Returns:
        (ln|z|, arg(z)) с arg(z) в (−π, π]

    Raises:
        DomainError: Если |z| == 0

    Examples:
        >>> ln_rectangular(1.0, 0.0)
        (0.0, 0.0)
        >>> ln_rectangular(-1.0, 0.0) == (0.0, math.pi)
        True
    """
    if real == 0.0 and imaginary == 0.0:
        logger.debug("ln: zero argument")
        raise DomainError("Logarithm of zero is undefined")

    return (log_magnitude(real, imaginary), principal_argument(real, imaginary))


def log_rectangular(
    real: float,
    imaginary: float,
    base_real: float,
    base_imaginary: float,
) -> tuple[float, float]:
    """
    Логарифм по произвольному (действительному или комплексному) основанию.

    log_b(z) = ln(z) / ln(b)

    Raises:
        DomainError: Если |z| == 0 или |b| == 0
        DegenerateLogBase: Если ln(b) == 0 (b == 1)

    Examples:
        >>> re, im = log_rectangular(8.0, 0.0, 2.0, 0.0)
        >>> abs(re - 3.0) < 1e-12 and im == 0.0
        True
    """
    ln_z = ln_rectangular(real, imaginary)

    try:
        ln_base = ln_rectangular(base_real, base_imaginary)
    except DomainError as e:
        raise DomainError(f"Logarithm base must be non-zero: {e}") from e

    if ln_base == (0.0, 0.0):
        logger.debug("log: base (%r, %r) gives ln(base) == 0", base_real, base_imaginary)
        raise DegenerateLogBase(
            f"Logarithm base ({base_real!r}, {base_imaginary!r}) has ln(base) == 0"
        )

    return divide_rectangular(ln_z[0], ln_z[1], ln_base[0], ln_base[1])


# =============================================================================
# ЭКСПОНЕНТА И СТЕПЕНЬ
# =============================================================================


def exp_rectangular(real: float, imaginary: float) -> tuple[float, float]:
    """
    Комплексная экспонента e^z.

    Raises:
        DomainError: Если e^re переполняет float
    """
    validate_finite(real, "real")
    validate_finite(imaginary, "imaginary")

    try:
        scale = math.exp(real)
    except OverflowError as e:
        logger.debug("exp: overflow for real part %r", real)
        raise DomainError(f"exp: result overflows for real part {real!r}") from e

    result_real = scale * math.cos(imaginary)
    result_imaginary = scale * math.sin(imaginary)

    ensure_finite_result("exp", result_real, result_imaginary)
    return (result_real, result_imaginary)


def _integer_power(real: float, imaginary: float, n: int) -> tuple[float, float]:
    """Бинарное возведение в целую степень (z != 0)."""
    if n < 0:
        base = divide_rectangular(1.0, 0.0, real, imaginary)
        n = -n
    else:
        base = (real, imaginary)

    result = (1.0, 0.0)
    while n:
        if n & 1:
            result = multiply_rectangular(result[0], result[1], base[0], base[1])
        n >>= 1
        if n:
            base = multiply_rectangular(base[0], base[1], base[0], base[1])

    return result


def integral_exponent(exponent_real: float, exponent_imaginary: float) -> int | None:
    """
    Целое значение показателя степени, если он целый и укладывается в порог.

    Returns:
        int если Im(w) == 0, Re(w) целое и |Re(w)| <= INTEGER_POWER_MAX_EXPONENT,
        иначе None
    """
    if exponent_imaginary != 0.0:
        return None

    if not float(exponent_real).is_integer():
        return None

    n = int(exponent_real)
    if abs(n) > INTEGER_POWER_MAX_EXPONENT:
        return None

    return n


def power_rectangular(
    real: float,
    imaginary: float,
    exponent_real: float,
    exponent_imaginary: float,
) -> tuple[float, float]:
    """
    Степень z^w на главной ветви ln.

    Пути вычисления:
    - z == 0: 0 при Re(w) > 0, иначе DomainError
    - w целое (см. integral_exponent): бинарное возведение в степень
    - иначе: exp(w · ln(z))

    Args:
        real, imaginary: Основание z
        exponent_real, exponent_imaginary: Показатель w

    Returns:
        (real, imaginary) результата

    Raises:
        DomainError: z == 0 и Re(w) <= 0, либо переполнение результата

    Examples:
        >>> power_rectangular(0.0, 1.0, 2.0, 0.0)
        (-1.0, 0.0)
        >>> power_rectangular(0.0, 0.0, 0.5, 3.0)
        (0.0, 0.0)
    """
    validate_finite(exponent_real, "exponent_real")
    validate_finite(exponent_imaginary, "exponent_imaginary")

    if real == 0.0 and imaginary == 0.0:
        if exponent_real > 0:
            return (0.0, 0.0)
        logger.debug(
            "power: zero base with exponent (%r, %r)", exponent_real, exponent_imaginary
        )
        raise DomainError(
            f"0 ** ({exponent_real!r}, {exponent_imaginary!r}) is undefined: "
            f"exponent real part must be > 0"
        )

    n = integral_exponent(exponent_real, exponent_imaginary)
    if n is not None:
        logger.debug("power: integer path, n=%d", n)
        return _integer_power(real, imaginary, n)

    logger.debug("power: exp(w * ln(z)) path")
    ln_z = ln_rectangular(real, imaginary)
    w_ln_z = multiply_rectangular(exponent_real, exponent_imaginary, ln_z[0], ln_z[1])
    return exp_rectangular(w_ln_z[0], w_ln_z[1])


# =============================================================================
# КОРНИ
# =============================================================================


def validate_root_degree(n: object) -> int:
    """
    Проверка степени корня.

    Допускаются int (кроме bool) и float с целым значением.

    Returns:
        n как int

    Raises:
        InvalidRoot: n == 0, n < 0 или n нецелое
    """
    if isinstance(n, bool):
        raise InvalidRoot(f"Root degree must be an integer >= 1, got {n!r}")

    if isinstance(n, Integral):
        degree = int(n)
    elif isinstance(n, float) and n.is_integer():
        degree = int(n)
    else:
        raise InvalidRoot(f"Root degree must be an integer >= 1, got {n!r}")

    if degree < 1:
        logger.debug("nth_root: invalid degree %r", n)
        raise InvalidRoot(f"Root degree must be an integer >= 1, got {n!r}")

    return degree


def _roots(root_magnitude: float, principal: float, degree: int) -> list[tuple[float, float]]:
    return [
        (root_magnitude, (principal + FULL_TURN_RAD * k) / degree)
        for k in range(degree)
    ]


def nth_roots_polar(magnitude: float, angle_rad: float, n: object) -> list[tuple[float, float]]:
    """
    Все n корней степени n в полярной форме.

    Корни упорядочены по k = 0 .. n−1:
        |z|^(1/n) ∠ (arg(z) + 2πk) / n
    где arg(z) — главное значение. Углы корней не нормализуются, поэтому
    порядок по k совпадает с порядком обхода окружности против часовой стрелки.

    Args:
        magnitude: Модуль z (>= 0)
        angle_rad: Угол z в радианах
        n: Степень корня

    Returns:
        Список из n пар (magnitude, angle_rad)

    Raises:
        InvalidRoot: n == 0, n < 0 или n нецелое

    Examples:
        >>> [round(a, 6) for _, a in nth_roots_polar(1.0, 0.0, 4)]
        [0.0, 1.570796, 3.141593, 4.712389]
    """
    degree = validate_root_degree(n)
    validate_finite(magnitude, "magnitude")

    if magnitude == 0.0:
        return [(0.0, 0.0)] * degree

    return _roots(magnitude ** (1.0 / degree), wrap_angle(angle_rad), degree)


def nth_roots_rectangular(real: float, imaginary: float, n: object) -> list[tuple[float, float]]:
    """
    Все n корней степени n для z в декартовой форме, в полярной форме.

    Модуль корня считается как exp(ln|z| / n): |z| может не помещаться
    в float, а его корень помещается (например, z = (1.7e308, 1.7e308)).

    Raises:
        InvalidRoot: n == 0, n < 0 или n нецелое
    """
    degree = validate_root_degree(n)

    if real == 0.0 and imaginary == 0.0:
        return [(0.0, 0.0)] * degree

    root_magnitude = math.exp(log_magnitude(real, imaginary) / degree)
    return _roots(root_magnitude, principal_argument(real, imaginary), degree)
