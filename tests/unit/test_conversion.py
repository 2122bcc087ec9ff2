"""
Тесты для Conversion — Rectangular ↔ Polar

Проверяемые инварианты:
1. magnitude >= 0, angle в (−π, π]
2. Нулевой модуль → угол 0 (включая −0.0 компоненты)
3. Round trip в пределах 1e-9 × max(1, |z|)
4. Большие компоненты не переполняются при вычислении модуля
5. Модуль > DBL_MAX → DomainError; ln|z| и arg(z) при этом вычислимы
"""

import math
import random

import pytest

from complexible.core.math.conversion import (
    log_magnitude,
    magnitude_rectangular,
    polar_to_rectangular,
    principal_argument,
    rectangular_to_polar,
)
from complexible.core.math.exceptions import DomainError
from complexible.core.math.numerical_safeguards import components_close


# =============================================================================
# ТЕСТЫ: rectangular_to_polar
# =============================================================================


class TestRectangularToPolar:
    """Тесты rectangular_to_polar"""

    def test_three_four_five(self):
        """(3, 4) → magnitude 5, angle ≈ 0.9272952"""
        magnitude, angle = rectangular_to_polar(3.0, 4.0)
        assert magnitude == 5.0
        assert abs(angle - 0.9272952) < 1e-7

    def test_axes(self):
        assert rectangular_to_polar(1.0, 0.0) == (1.0, 0.0)
        assert rectangular_to_polar(0.0, 2.0) == (2.0, math.pi / 2)
        assert rectangular_to_polar(0.0, -2.0) == (2.0, -math.pi / 2)

    def test_negative_real_axis_is_plus_pi(self):
        """Отрицательная действительная ось → +π (главное значение)"""
        assert rectangular_to_polar(-1.0, 0.0) == (1.0, math.pi)
        assert rectangular_to_polar(-1.0, -0.0) == (1.0, math.pi)

    def test_zero_has_zero_angle(self):
        assert rectangular_to_polar(0.0, 0.0) == (0.0, 0.0)
        assert rectangular_to_polar(-0.0, 0.0) == (0.0, 0.0)
        assert rectangular_to_polar(-0.0, -0.0) == (0.0, 0.0)

    def test_large_components_do_not_overflow(self):
        magnitude, angle = rectangular_to_polar(1e200, 1e200)
        assert math.isfinite(magnitude)
        assert abs(magnitude / (math.sqrt(2.0) * 1e200) - 1.0) < 1e-15
        assert abs(angle - math.pi / 4) < 1e-15

    def test_magnitude_beyond_dbl_max(self):
        """Конечные компоненты, модуль которых не представим в float"""
        with pytest.raises(DomainError, match="magnitude"):
            rectangular_to_polar(1.7e308, 1.7e308)

    def test_nan_rejected(self):
        with pytest.raises(ValueError, match="NaN/Inf"):
            rectangular_to_polar(float("nan"), 1.0)

        with pytest.raises(ValueError, match="NaN/Inf"):
            rectangular_to_polar(1.0, float("inf"))


# =============================================================================
# ТЕСТЫ: polar_to_rectangular
# =============================================================================


class TestPolarToRectangular:
    """Тесты polar_to_rectangular"""

    def test_scenario_five_at_angle(self):
        """5 ∠ 0.9272952 → ≈ (3, 4)"""
        real, imaginary = polar_to_rectangular(5.0, 0.9272952)
        assert abs(real - 3.0) < 1e-6
        assert abs(imaginary - 4.0) < 1e-6

    def test_zero_magnitude(self):
        assert polar_to_rectangular(0.0, 1.234) == (0.0, 0.0)

    def test_unnormalized_angle(self):
        """Угол вне (−π, π] допускается"""
        real, imaginary = polar_to_rectangular(2.0, 2.5 * math.pi)
        assert abs(real) < 1e-12
        assert abs(imaginary - 2.0) < 1e-12

    def test_negative_magnitude_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            polar_to_rectangular(-1.0, 0.0)

    def test_nan_rejected(self):
        with pytest.raises(ValueError, match="NaN/Inf"):
            polar_to_rectangular(1.0, float("nan"))


# =============================================================================
# ТЕСТЫ: Round trip
# =============================================================================


class TestRoundTrip:
    """Round trip rectangular → polar → rectangular"""

    def test_round_trip_random_grid(self):
        rng = random.Random(20240601)
        for _ in range(500):
            scale = 10.0 ** rng.randint(-6, 12)
            real = rng.uniform(-1.0, 1.0) * scale
            imaginary = rng.uniform(-1.0, 1.0) * scale

            back = polar_to_rectangular(*rectangular_to_polar(real, imaginary))

            assert components_close(real, imaginary, *back)

    def test_round_trip_special_points(self):
        points = [
            (0.0, 0.0),
            (1.0, 0.0),
            (-1.0, 0.0),
            (0.0, 1.0),
            (0.0, -1.0),
            (-3.5, -2.25),
            (1e-300, -1e-300),
            (1e300, 1e300),
        ]
        for real, imaginary in points:
            back = polar_to_rectangular(*rectangular_to_polar(real, imaginary))
            assert components_close(real, imaginary, *back)

    def test_angle_always_principal(self):
        rng = random.Random(7)
        for _ in range(200):
            magnitude, angle = rectangular_to_polar(
                rng.uniform(-5.0, 5.0), rng.uniform(-5.0, 5.0)
            )
            assert magnitude >= 0.0
            assert -math.pi < angle <= math.pi


# =============================================================================
# ТЕСТЫ: модуль, ln|z| и аргумент по отдельности
# =============================================================================


class TestMagnitudeRectangular:
    """Тесты magnitude_rectangular"""

    def test_magnitude(self):
        assert magnitude_rectangular(3.0, -4.0) == 5.0
        assert magnitude_rectangular(-0.0, 0.0) == 0.0

    def test_largest_representable(self):
        assert magnitude_rectangular(1.7e308, 0.0) == 1.7e308

    def test_overflow_domain_error(self):
        with pytest.raises(DomainError):
            magnitude_rectangular(1.7e308, 1.7e308)

        with pytest.raises(DomainError):
            magnitude_rectangular(-1.7e308, 1.7e308)


class TestLogMagnitude:
    """Тесты log_magnitude"""

    def test_regular_values(self):
        assert log_magnitude(1.0, 0.0) == 0.0
        assert abs(log_magnitude(3.0, 4.0) - math.log(5.0)) < 1e-15

    def test_beyond_dbl_max(self):
        """ln|z| = ln(1.7e308) + ln(√2)"""
        expected = math.log(1.7e308) + 0.5 * math.log(2.0)
        assert abs(log_magnitude(1.7e308, 1.7e308) - expected) < 1e-12
        assert abs(log_magnitude(-1.7e308, -1.7e308) - expected) < 1e-12

    def test_tiny_values(self):
        assert abs(log_magnitude(1e-300, 0.0) - math.log(1e-300)) < 1e-12

    def test_zero_domain_error(self):
        with pytest.raises(DomainError, match="Logarithm of zero"):
            log_magnitude(0.0, -0.0)


class TestPrincipalArgument:
    """Тесты principal_argument"""

    def test_matches_rectangular_to_polar(self):
        rng = random.Random(21)
        for _ in range(100):
            real, imaginary = rng.uniform(-5.0, 5.0), rng.uniform(-5.0, 5.0)
            assert principal_argument(real, imaginary) == rectangular_to_polar(real, imaginary)[1]

    def test_branch_cut(self):
        assert principal_argument(-2.0, 0.0) == math.pi
        assert principal_argument(-2.0, -0.0) == math.pi
        assert principal_argument(0.0, 0.0) == 0.0

    def test_beyond_dbl_max(self):
        assert abs(principal_argument(1.7e308, 1.7e308) - math.pi / 4) < 1e-15
        assert abs(principal_argument(-1.7e308, 1.7e308) - 0.75 * math.pi) < 1e-15
