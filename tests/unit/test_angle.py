"""
Тесты для модели Angle

Проверяет:
1. Создание и валидацию (finite значения)
2. Конверсию радианы ↔ градусы
3. Нормализацию к (−π, π] / (−180°, 180°]
4. Толерантное равенство, независимое от единицы
5. Immutability (frozen=True)
"""

import math

import pytest
from pydantic import ValidationError

from complexible.core.domain import Angle, AngleUnit


# =============================================================================
# ANGLE TESTS
# =============================================================================


class TestAngleConstruction:
    """Тесты создания Angle"""

    def test_from_radians(self) -> None:
        angle = Angle.from_radians(1.5)
        assert angle.value == 1.5
        assert angle.unit is AngleUnit.RADIAN

    def test_from_degrees(self) -> None:
        angle = Angle.from_degrees(45.0)
        assert angle.value == 45.0
        assert angle.unit is AngleUnit.DEGREE

    def test_zero(self) -> None:
        assert Angle.zero().value == 0.0
        assert Angle.zero().unit is AngleUnit.RADIAN

    def test_unit_from_string(self) -> None:
        assert Angle(value=10.0, unit="deg").unit is AngleUnit.DEGREE

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Angle.from_radians(float("nan"))

    def test_inf_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Angle.from_degrees(float("inf"))

    def test_immutable(self) -> None:
        """Angle должен быть immutable (frozen=True)"""
        angle = Angle.from_radians(1.0)
        with pytest.raises(ValidationError):
            angle.value = 2.0

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Angle.from_radians(1.0))


class TestAngleConversion:
    """Тесты конверсии единиц"""

    def test_radians_to_degrees(self) -> None:
        assert abs(Angle.from_radians(math.pi).to_degrees() - 180.0) < 1e-12

    def test_degrees_to_radians(self) -> None:
        assert abs(Angle.from_degrees(90.0).to_radians() - math.pi / 2) < 1e-15

    def test_same_unit_identity(self) -> None:
        assert Angle.from_radians(0.3).to_radians() == 0.3
        assert Angle.from_degrees(30.0).to_degrees() == 30.0

    def test_round_trip(self) -> None:
        for d in (-720.0, -90.0, 0.0, 1.0, 45.0, 359.0, 1e6):
            radians = Angle.from_degrees(d).to_radians()
            assert abs(Angle.from_radians(radians).to_degrees() - d) <= 1e-9 * max(1.0, abs(d))


class TestAngleNormalized:
    """Тесты normalized()"""

    def test_radians_in_range(self) -> None:
        normalized = Angle.from_radians(1.5 * math.pi).normalized()
        assert normalized.unit is AngleUnit.RADIAN
        assert abs(normalized.value + 0.5 * math.pi) < 1e-12

    def test_degrees_in_range(self) -> None:
        normalized = Angle.from_degrees(270.0).normalized()
        assert normalized.unit is AngleUnit.DEGREE
        assert normalized.value == -90.0

    def test_minus_pi_maps_to_pi(self) -> None:
        assert Angle.from_radians(-math.pi).normalized().value == math.pi
        assert Angle.from_degrees(-180.0).normalized().value == 180.0

    def test_no_forced_normalization_on_construction(self) -> None:
        assert Angle.from_degrees(720.0).value == 720.0


class TestAngleEquality:
    """Тесты толерантного равенства"""

    def test_equal_across_units(self) -> None:
        assert Angle.from_degrees(180.0) == Angle.from_radians(math.pi)

    def test_equal_across_full_turns(self) -> None:
        assert Angle.from_degrees(-90.0) == Angle.from_degrees(270.0)
        assert Angle.from_radians(0.5) == Angle.from_radians(0.5 + 2.0 * math.pi)

    def test_equal_across_branch_cut(self) -> None:
        assert Angle.from_radians(math.pi - 1e-12) == Angle.from_radians(-math.pi + 1e-12)

    def test_not_equal(self) -> None:
        assert Angle.from_radians(0.0) != Angle.from_radians(1e-6)

    def test_custom_eps(self) -> None:
        a = Angle.from_radians(0.0)
        b = Angle.from_radians(1e-6)
        assert a.is_close(b, eps=1e-5)
        assert not a.is_close(b)

    def test_non_positive_eps_rejected(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            Angle.zero().is_close(Angle.zero(), eps=-1.0)

    def test_comparison_with_other_types(self) -> None:
        assert Angle.zero() != 0.0


class TestAngleArithmetic:
    """Тесты add/subtract/scale"""

    def test_add_keeps_left_unit(self) -> None:
        result = Angle.from_degrees(30.0).add(Angle.from_radians(math.pi / 4))
        assert result.unit is AngleUnit.DEGREE
        assert abs(result.value - 75.0) < 1e-12

    def test_subtract(self) -> None:
        result = Angle.from_radians(1.0).subtract(Angle.from_radians(0.25))
        assert result.value == 0.75

    def test_scale(self) -> None:
        assert Angle.from_degrees(10.0).scale(-3.0).value == -30.0


class TestAngleStr:
    def test_str(self) -> None:
        assert str(Angle.from_radians(0.5)) == "0.5 rad"
        assert str(Angle.from_degrees(45.0)) == "45.0°"
