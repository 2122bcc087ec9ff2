"""
Angle — угол с единицей измерения

Immutable Pydantic модель: скалярное значение + единица (радианы/градусы).

Нормализация к (−π, π] не навязывается при создании и применяется только
там, где операции нужно главное значение (аргумент, ln, power).
Равенство углов не зависит от единицы измерения и учитывает периодичность.
"""

from enum import Enum

from pydantic import BaseModel, Field

from complexible.core.math.numerical_safeguards import (
    DEG_TO_RAD,
    EPS_COMPLEX_COMPARE,
    FULL_TURN_DEG,
    FULL_TURN_RAD,
    RAD_TO_DEG,
    angle_distance,
    wrap_angle,
)


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    RADIAN = "rad"
    DEGREE = "deg"


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Угол, помеченный единицей измерения.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    Модель не хешируется: равенство толерантное (EPS_COMPLEX_COMPARE).
    """

    value: float = Field(..., allow_inf_nan=False, description="Значение угла")
    unit: AngleUnit = Field(AngleUnit.RADIAN, description="Единица измерения (rad/deg)")

    model_config = {"frozen": True}

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_radians(cls, r: float) -> "Angle":
        """Угол в радианах."""
        return cls(value=r, unit=AngleUnit.RADIAN)

    @classmethod
    def from_degrees(cls, d: float) -> "Angle":
        """Угол в градусах."""
        return cls(value=d, unit=AngleUnit.DEGREE)

    @classmethod
    def zero(cls) -> "Angle":
        return cls(value=0.0, unit=AngleUnit.RADIAN)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_radians(self) -> float:
        """Значение в радианах."""
        if self.unit is AngleUnit.RADIAN:
            return self.value
        return self.value * DEG_TO_RAD

    def to_degrees(self) -> float:
        """
        Значение в градусах.

        degrees = radians × 180/π
        """
        if self.unit is AngleUnit.DEGREE:
            return self.value
        return self.value * RAD_TO_DEG

    def normalized(self) -> "Angle":
        """
        Эквивалентный угол в (−π, π] (или (−180°, 180°]) в той же единице.

        Добавляет/вычитает целое число полных оборотов. Ровно −π → +π.
        """
        full_turn = FULL_TURN_RAD if self.unit is AngleUnit.RADIAN else FULL_TURN_DEG
        return Angle(value=wrap_angle(self.value, full_turn), unit=self.unit)

    # -------------------------------------------------------------------------
    # Арифметика углов
    # -------------------------------------------------------------------------

    def _same_unit_value(self, other: "Angle") -> float:
        if other.unit is self.unit:
            return other.value
        if self.unit is AngleUnit.RADIAN:
            return other.to_radians()
        return other.to_degrees()

    def add(self, other: "Angle") -> "Angle":
        """Сумма углов в единице левого операнда."""
        return Angle(value=self.value + self._same_unit_value(other), unit=self.unit)

    def subtract(self, other: "Angle") -> "Angle":
        """Разность углов в единице левого операнда."""
        return Angle(value=self.value - self._same_unit_value(other), unit=self.unit)

    def scale(self, k: float) -> "Angle":
        return Angle(value=self.value * k, unit=self.unit)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def is_close(self, other: "Angle", eps: float = EPS_COMPLEX_COMPARE) -> bool:
        """
        Равенство углов с толерантностью.

        Сравниваются радианные значения по окружности: углы 179.9999999999°
        и −180° равны. Единица измерения не учитывается.

        Args:
            other: Второй угол
            eps: Толерантность в радианах (default: 1e-9)

        Returns:
            True если расстояние по окружности < eps
        """
        if eps <= 0:
            raise ValueError(f"eps must be positive, got {eps}")
        return angle_distance(self.to_radians(), other.to_radians()) < eps

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.is_close(other)

    def __str__(self) -> str:
        if self.unit is AngleUnit.DEGREE:
            return f"{self.value}°"
        return f"{self.value} rad"
