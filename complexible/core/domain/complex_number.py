"""
ComplexNumber — RectangularForm и PolarForm

Две независимые immutable Pydantic модели одного математического объекта:
- RectangularForm: (real, imaginary)
- PolarForm: (magnitude, angle)

Ни одна форма не наследует другую; связь только через явные функции
конверсии (core.math.conversion). Все вычисления делегируются float-ядрам
из core.math; модели отвечают за валидацию полей, приведение операндов
и выбор пути вычисления.

Операнды бинарных операций: RectangularForm, PolarForm, int/float
(как from_real(x)) или встроенный complex. Результат имеет форму
левого операнда (self).

Равенство толерантное (EPS_COMPLEX_COMPARE), работает между формами,
поэтому модели не хешируются.
"""

from numbers import Real
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from complexible.core.contracts import (
    validate_complex,
    validate_polar_form,
    validate_rectangular_form,
)
from complexible.core.domain.angle import Angle, AngleUnit
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
from complexible.core.math.conversion import (
    magnitude_rectangular,
    polar_to_rectangular,
    principal_argument,
    rectangular_to_polar,
)
from complexible.core.math.numerical_safeguards import (
    EPS_COMPLEX_COMPARE,
    components_close,
    validate_finite,
    wrap_angle,
)
from complexible.core.math.transcendental import (
    exp_rectangular,
    ln_rectangular,
    log_rectangular,
    nth_roots_polar,
    nth_roots_rectangular,
    power_rectangular,
)

Operand = Union["RectangularForm", "PolarForm", int, float, complex]


# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def _components(value: Any) -> tuple[float, float]:
    """
    Декартовы компоненты операнда.

    Raises:
        TypeError: Если операнд не комплексное/действительное число
    """
    if isinstance(value, RectangularForm):
        return (value.re, value.im)
    if isinstance(value, PolarForm):
        return polar_to_rectangular(value.r, value.theta.to_radians())
    if isinstance(value, bool):
        raise TypeError("bool is not a valid complex operand")
    if isinstance(value, Real):
        validate_finite(float(value), "operand")
        return (float(value), 0.0)
    if isinstance(value, complex):
        validate_finite(value.real, "operand.real")
        validate_finite(value.imag, "operand.imag")
        return (value.real, value.imag)
    raise TypeError(f"Unsupported complex operand type: {type(value).__name__}")


def _polar_components(value: Any) -> tuple[float, float]:
    """Полярные компоненты операнда (magnitude, angle_rad)."""
    if isinstance(value, PolarForm):
        return (value.r, value.theta.to_radians())
    return rectangular_to_polar(*_components(value))


def _validate_scalar(k: Any) -> float:
    if isinstance(k, bool) or not isinstance(k, Real):
        raise TypeError(f"Scalar must be a real number, got {type(k).__name__}")
    k = float(k)
    validate_finite(k, "scalar")
    return k


def _format_components(real: float, imaginary: float) -> str:
    """Каноническое строковое представление "<real> + <imaginary>i"."""
    if imaginary < 0:
        return f"{real} - {-imaginary}i"
    return f"{real} + {abs(imaginary)}i"


# =============================================================================
# RECTANGULAR FORM
# =============================================================================


class RectangularForm(BaseModel):
    """
    Комплексное число в декартовой форме (real, imaginary).

    Immutable модель (frozen=True). Любая пара конечных float валидна;
    NaN/Inf отвергаются при создании (ValidationError).

    Поля хранятся как re/im; имена real/imaginary заняты аксессорами
    и используются как алиасы при создании и сериализации.
    """

    re: float = Field(..., alias="real", allow_inf_nan=False, description="Действительная часть")
    im: float = Field(
        0.0, alias="imaginary", allow_inf_nan=False, description="Мнимая часть"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_real(cls, x: float) -> "RectangularForm":
        return cls(re=x, im=0.0)

    @classmethod
    def from_cartesian(cls, re: float, im: float) -> "RectangularForm":
        return cls(re=re, im=im)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RectangularForm":
        """
        Создание из словаря по контракту rectangular_form.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_rectangular_form(data)
        return cls(re=data["real"], im=data["imaginary"])

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_polar(self) -> "PolarForm":
        """
        Конверсия в полярную форму.

        Raises:
            DomainError: Если |z| не представим конечным float

        Examples:
            >>> RectangularForm.from_cartesian(3.0, 4.0).to_polar().magnitude()
            5.0
        """
        magnitude, angle = rectangular_to_polar(self.re, self.im)
        return PolarForm(r=magnitude, theta=Angle.from_radians(angle))

    def to_rectangular(self) -> "RectangularForm":
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"form": "rectangular", "real": self.re, "imaginary": self.im}

    # -------------------------------------------------------------------------
    # Аксессоры
    # -------------------------------------------------------------------------

    def real(self) -> float:
        return self.re

    def imaginary(self) -> float:
        return self.im

    def magnitude(self) -> float:
        """
        Raises:
            DomainError: Если |z| не представим конечным float
        """
        return magnitude_rectangular(self.re, self.im)

    def argument(self) -> Angle:
        """Главное значение аргумента в (−π, π], радианы."""
        return Angle.from_radians(principal_argument(self.re, self.im))

    def argument_radians(self) -> float:
        return self.argument().to_radians()

    def argument_degrees(self) -> float:
        return self.argument().to_degrees()

    def is_zero(self) -> bool:
        return self.re == 0.0 and self.im == 0.0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> "RectangularForm":
        return _rectangular(add_rectangular(self.re, self.im, *_components(other)))

    def subtract(self, other: Operand) -> "RectangularForm":
        return _rectangular(subtract_rectangular(self.re, self.im, *_components(other)))

    def multiply(self, other: Operand) -> "RectangularForm":
        """(ac − bd) + (ad + bc)i"""
        return _rectangular(multiply_rectangular(self.re, self.im, *_components(other)))

    def multiply_scalar(self, k: float) -> "RectangularForm":
        return _rectangular(scale_rectangular(self.re, self.im, _validate_scalar(k)))

    def divide(self, other: Operand) -> "RectangularForm":
        """
        Частное self / other.

        Raises:
            DivisionByZero: Если модуль other равен 0
        """
        return _rectangular(divide_rectangular(self.re, self.im, *_components(other)))

    def conjugate(self) -> "RectangularForm":
        return _rectangular(conjugate_rectangular(self.re, self.im))

    def negate(self) -> "RectangularForm":
        return self.multiply_scalar(-1.0)

    def reciprocal(self) -> "RectangularForm":
        """1 / self; DivisionByZero для нуля."""
        return _rectangular(divide_rectangular(1.0, 0.0, self.re, self.im))

    # -------------------------------------------------------------------------
    # Трансцендентные функции
    # -------------------------------------------------------------------------

    def ln(self) -> "RectangularForm":
        """
        Натуральный логарифм (главная ветвь).

        Raises:
            DomainError: Если self == 0
        """
        return _rectangular(ln_rectangular(self.re, self.im))

    def log(self, base: Operand) -> "RectangularForm":
        """
        Логарифм по основанию base (действительному или комплексному).

        Raises:
            DomainError: Если self == 0 или base == 0
            DegenerateLogBase: Если base == 1
        """
        return _rectangular(log_rectangular(self.re, self.im, *_components(base)))

    def log10(self) -> "RectangularForm":
        return self.log(10.0)

    def exp(self) -> "RectangularForm":
        return _rectangular(exp_rectangular(self.re, self.im))

    def power(self, exponent: Operand) -> "RectangularForm":
        """
        Степень self ** exponent.

        Целый показатель считается бинарным возведением в степень,
        остальные — через exp(w · ln(self)).

        Raises:
            DomainError: self == 0 и Re(exponent) <= 0
        """
        return _rectangular(power_rectangular(self.re, self.im, *_components(exponent)))

    def sqrt(self) -> "RectangularForm":
        """Главный квадратный корень (k = 0)."""
        return self.nth_root(2)[0]

    def nth_root(self, n: int) -> list["RectangularForm"]:
        """
        Все n корней степени n, упорядоченные по k = 0 .. n−1.

        Raises:
            InvalidRoot: n == 0, n < 0 или n нецелое
        """
        return [
            _rectangular(polar_to_rectangular(m, a))
            for m, a in nth_roots_rectangular(self.re, self.im, n)
        ]

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def equals(self, other: Operand, eps: float = EPS_COMPLEX_COMPARE) -> bool:
        """
        Структурное сравнение с толерантностью eps (масштабируется модулем).
        """
        return components_close(self.re, self.im, *_components(other), eps=eps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (RectangularForm, PolarForm)):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return _format_components(self.re, self.im)


def _rectangular(components: tuple[float, float]) -> RectangularForm:
    return RectangularForm(re=components[0], im=components[1])


# =============================================================================
# POLAR FORM
# =============================================================================


class PolarForm(BaseModel):
    """
    Комплексное число в полярной форме (magnitude, angle).

    Immutable модель (frozen=True).

    Инварианты:
    - magnitude >= 0 (ValidationError иначе)
    - magnitude == 0 → angle == 0 рад (точка в начале координат)

    Угол хранится как есть (без нормализации); главное значение
    возвращает argument(). Угол результата операции сохраняет единицу
    измерения угла self.
    """

    r: float = Field(..., alias="magnitude", ge=0, allow_inf_nan=False, description="Модуль")
    theta: Angle = Field(default_factory=Angle.zero, alias="angle", description="Угол")

    model_config = {"frozen": True, "populate_by_name": True}

    __hash__ = None  # type: ignore[assignment]

    @field_validator("theta", mode="before")
    @classmethod
    def validate_theta(cls, v: Any, info) -> Any:
        """
        Угол как float трактуется в радианах; для нулевого модуля угол 0.
        """
        if isinstance(v, Real) and not isinstance(v, bool):
            v = Angle.from_radians(float(v))
        if info.data.get("r") == 0.0:
            return Angle.zero()
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_polar(cls, magnitude: float, angle: Union[Angle, float]) -> "PolarForm":
        """
        Args:
            magnitude: Модуль (>= 0)
            angle: Angle или float в радианах
        """
        return cls(r=magnitude, theta=angle)

    @classmethod
    def from_real(cls, x: float) -> "PolarForm":
        return RectangularForm.from_real(x).to_polar()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolarForm":
        """
        Создание из словаря по контракту polar_form.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_polar_form(data)
        return _polar_from_document(data)

    def _from_radians(self, magnitude: float, angle_rad: float) -> "PolarForm":
        """Результат с углом в единице измерения self."""
        angle = Angle.from_radians(angle_rad)
        if self.theta.unit is AngleUnit.DEGREE:
            angle = Angle.from_degrees(angle.to_degrees())
        return PolarForm(r=magnitude, theta=angle)

    def _from_components(self, components: tuple[float, float]) -> "PolarForm":
        return self._from_radians(*rectangular_to_polar(*components))

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_rectangular(self) -> RectangularForm:
        """
        Конверсия в декартову форму.

        real = m·cos(θ), imaginary = m·sin(θ)
        """
        return _rectangular(polar_to_rectangular(self.r, self.theta.to_radians()))

    def to_polar(self) -> "PolarForm":
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "form": "polar",
            "magnitude": self.r,
            "angle": {"value": self.theta.value, "unit": self.theta.unit.value},
        }

    # -------------------------------------------------------------------------
    # Аксессоры
    # -------------------------------------------------------------------------

    def real(self) -> float:
        return polar_to_rectangular(self.r, self.theta.to_radians())[0]

    def imaginary(self) -> float:
        return polar_to_rectangular(self.r, self.theta.to_radians())[1]

    def magnitude(self) -> float:
        return self.r

    def argument(self) -> Angle:
        """Главное значение угла в (−π, π] в единице измерения угла."""
        return self.theta.normalized()

    def argument_radians(self) -> float:
        return wrap_angle(self.theta.to_radians())

    def argument_degrees(self) -> float:
        return self.theta.normalized().to_degrees()

    def is_zero(self) -> bool:
        return self.r == 0.0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> "PolarForm":
        """Сложение через декартову форму."""
        return self._from_components(add_rectangular(*_components(self), *_components(other)))

    def subtract(self, other: Operand) -> "PolarForm":
        return self._from_components(subtract_rectangular(*_components(self), *_components(other)))

    def multiply(self, other: Operand) -> "PolarForm":
        """m1·m2 ∠ normalized(a1 + a2)"""
        return self._from_radians(
            *multiply_polar(self.r, self.theta.to_radians(), *_polar_components(other))
        )

    def multiply_scalar(self, k: float) -> "PolarForm":
        """Модуль × |k|; отрицательный k поворачивает угол на π."""
        return self._from_radians(
            *scale_polar(self.r, self.theta.to_radians(), _validate_scalar(k))
        )

    def divide(self, other: Operand) -> "PolarForm":
        """
        m1/m2 ∠ normalized(a1 − a2)

        Raises:
            DivisionByZero: Если модуль other равен 0
        """
        return self._from_radians(
            *divide_polar(self.r, self.theta.to_radians(), *_polar_components(other))
        )

    def conjugate(self) -> "PolarForm":
        return PolarForm(r=self.r, theta=self.theta.scale(-1.0))

    def negate(self) -> "PolarForm":
        return self.multiply_scalar(-1.0)

    def reciprocal(self) -> "PolarForm":
        return self._from_radians(*divide_polar(1.0, 0.0, self.r, self.theta.to_radians()))

    # -------------------------------------------------------------------------
    # Трансцендентные функции
    # -------------------------------------------------------------------------

    def ln(self) -> "PolarForm":
        return self._from_components(ln_rectangular(*_components(self)))

    def log(self, base: Operand) -> "PolarForm":
        return self._from_components(log_rectangular(*_components(self), *_components(base)))

    def log10(self) -> "PolarForm":
        return self.log(10.0)

    def exp(self) -> "PolarForm":
        return self._from_components(exp_rectangular(*_components(self)))

    def power(self, exponent: Operand) -> "PolarForm":
        return self._from_components(power_rectangular(*_components(self), *_components(exponent)))

    def sqrt(self) -> "PolarForm":
        return self.nth_root(2)[0]

    def nth_root(self, n: int) -> list["PolarForm"]:
        """
        Все n корней степени n, упорядоченные по k = 0 .. n−1.

        Углы корней (arg + 2πk)/n не нормализуются.
        """
        return [
            self._from_radians(m, a)
            for m, a in nth_roots_polar(self.r, self.theta.to_radians(), n)
        ]

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def equals(self, other: Operand, eps: float = EPS_COMPLEX_COMPARE) -> bool:
        """
        Сравнение через декартовы компоненты: учитывает периодичность угла
        и нулевой модуль с произвольным углом.
        """
        return components_close(*_components(self), *_components(other), eps=eps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (RectangularForm, PolarForm)):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return _format_components(*_components(self))


def _polar_from_document(data: dict[str, Any]) -> PolarForm:
    """PolarForm из документа, уже прошедшего контракт polar_form."""
    angle = data["angle"]
    return PolarForm(r=data["magnitude"], theta=Angle(value=angle["value"], unit=angle["unit"]))


# =============================================================================
# ФУНКЦИИ-КОНСТРУКТОРЫ
# =============================================================================


def from_real(x: float) -> RectangularForm:
    """Действительное число как RectangularForm (x, 0)."""
    return RectangularForm.from_real(x)


def from_cartesian(re: float, im: float) -> RectangularForm:
    return RectangularForm.from_cartesian(re, im)


def from_polar(magnitude: float, angle: Union[Angle, float]) -> PolarForm:
    """
    Args:
        magnitude: Модуль (>= 0)
        angle: Angle или float в радианах
    """
    return PolarForm.from_polar(magnitude, angle)


def from_dict(data: dict[str, Any]) -> Union[RectangularForm, PolarForm]:
    """
    Создание из словаря по полю "form" ("rectangular" или "polar").

    Raises:
        ValueError: Если форма неизвестна
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    if validate_complex(data) == "rectangular":
        return RectangularForm(re=data["real"], im=data["imaginary"])
    return _polar_from_document(data)
