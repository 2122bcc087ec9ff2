"""
Numerical Safeguards — Safe Math Primitives для комплексной арифметики

Модуль обеспечивает численную устойчивость всех операций над комплексными числами:
- Epsilon-параметры для сравнений float и углов
- NaN/Inf проверки на границах операций (вход и результат)
- Epsilon-сравнения комплексных чисел, масштабированные модулем
- Нормализация углов к главному значению (−π, π]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не возвращаются молча (вход → ValueError, результат → DomainError)
2. Сравнения комплексных чисел масштабируются модулем и не переполняются
3. Главное значение угла лежит в (−π, π]: −π отображается в +π
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from complexible.core.math.exceptions import DomainError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения комплексных чисел и углов (по умолчанию для equals/==)
EPS_COMPLEX_COMPARE: Final[float] = 1e-9

# Полный оборот в радианах и градусах
FULL_TURN_RAD: Final[float] = 2.0 * math.pi
FULL_TURN_DEG: Final[float] = 360.0

# Множители конверсии единиц угла
RAD_TO_DEG: Final[float] = 180.0 / math.pi
DEG_TO_RAD: Final[float] = math.pi / 180.0


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация входного значения операции.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def ensure_finite_result(operation: str, *components: float) -> None:
    """
    Проверка результата операции на NaN/Inf.

    Переполнение (например, exp от большого аргумента или произведение
    двух больших модулей) не должно возвращаться вызывающему как inf.

    Args:
        operation: Имя операции (для сообщения об ошибке)
        *components: Компоненты результата

    Raises:
        DomainError: Если хотя бы одна компонента NaN/Inf
    """
    for value in components:
        if not is_valid_float(value):
            raise DomainError(
                f"{operation}: result is not representable as finite float "
                f"(components={components})"
            )


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def components_close(
    re1: float,
    im1: float,
    re2: float,
    im2: float,
    eps: float = EPS_COMPLEX_COMPARE,
) -> bool:
    """
    Сравнение двух комплексных чисел по компонентам.

    Толерантность масштабируется модулем: для больших значений абсолютная
    ошибка округления растёт пропорционально |z|, поэтому порог равен
    eps * max(1, |z1|, |z2|).

    Args:
        re1, im1: Первое число
        re2, im2: Второе число
        eps: Толерантность (default: EPS_COMPLEX_COMPARE)

    Returns:
        True если |z1 - z2| <= eps * max(1, |z1|, |z2|)
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    # Компоненты делятся на s, чтобы |z| и |z1 − z2| не переполнялись
    # вблизи DBL_MAX; неравенство от масштаба не зависит.
    s = max(1.0, abs(re1), abs(im1), abs(re2), abs(im2))
    re1, im1, re2, im2 = re1 / s, im1 / s, re2 / s, im2 / s

    scale = max(1.0 / s, math.hypot(re1, im1), math.hypot(re2, im2))
    return math.hypot(re1 - re2, im1 - im2) <= eps * scale


# =============================================================================
# НОРМАЛИЗАЦИЯ УГЛОВ
# =============================================================================


def wrap_angle(value: float, full_turn: float = FULL_TURN_RAD) -> float:
    """
    Приведение угла к главному значению (−full_turn/2, full_turn/2].

    math.remainder возвращает значение в [−half, half]; левая граница
    отображается в правую, чтобы главное значение было единственным.

    Args:
        value: Угол (finite)
        full_turn: Полный оборот в единицах угла (2π или 360)

    Returns:
        Эквивалентный угол в (−full_turn/2, full_turn/2]

    Examples:
        >>> wrap_angle(-math.pi) == math.pi
        True
        >>> wrap_angle(270.0, FULL_TURN_DEG)
        -90.0
        >>> wrap_angle(540.0, FULL_TURN_DEG)
        180.0
    """
    validate_finite(value, "angle")

    half_turn = full_turn / 2.0
    wrapped = math.remainder(value, full_turn)

    if wrapped <= -half_turn:
        return half_turn
    return wrapped


def angle_distance(a_rad: float, b_rad: float) -> float:
    """
    Расстояние между двумя углами по окружности (радианы, в [0, π]).

    Углы чуть меньше +π и чуть больше −π находятся рядом.
    """
    return abs(wrap_angle(a_rad - b_rad))
