"""
Complex Number Contracts

Контракты сериализованной формы комплексного числа (to_dict/from_dict).

Проверка в два этапа:
1. Структура: JSON Schema (Draft 2020-12) из schema/<form>_form.json
2. Семантика, которую схема не выражает:
   - все числовые поля конечны (dict из Python может содержать nan/inf,
     а тип "number" их пропускает)
   - polar: нулевой модуль только с нулевым углом (каноническое начало
     координат, как его хранит PolarForm)

Нарушения обоих этапов возвращаются как jsonschema.ValidationError
с путём до поля, поэтому вызывающий код обрабатывает один тип ошибки.
"""

import json
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Поддерживаемые формы (значение поля "form")
FORMS: Final[tuple[str, ...]] = ("rectangular", "polar")

# Пути до числовых полей каждой формы
_NUMERIC_FIELDS: Final[dict[str, tuple[tuple[str, ...], ...]]] = {
    "rectangular": (("real",), ("imaginary",)),
    "polar": (("magnitude",), ("angle", "value")),
}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(form: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-validation схемы формы (кэшируется).

    Args:
        form: Имя формы ("rectangular" или "polar")
        schema_dir: Каталог со схемами

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{form}_form.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for {form} form: {e.message}") from e

    return schema


# =============================================================================
# CONTRACT
# =============================================================================


class ComplexFormContract:
    """
    Контракт одной формы комплексного числа: схема + семантические правила.
    """

    def __init__(self, form: str, schema_dir: Path = SCHEMA_DIR):
        if form not in FORMS:
            raise ValueError(f"Unknown complex number form: {form!r}")

        self.form = form
        self._validator = Draft202012Validator(load_schema(form, schema_dir))

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """
        Все нарушения контракта.

        Семантика проверяется только для структурно валидного документа:
        иначе обращение к полям не определено.
        """
        structural = list(self._validator.iter_errors(data))
        if structural:
            yield from structural
            return

        yield from self._non_finite_errors(data)

        if self.form == "polar":
            yield from self._zero_magnitude_errors(data)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return next(self.iter_errors(data), None) is None

    # -------------------------------------------------------------------------
    # Семантические правила
    # -------------------------------------------------------------------------

    def _non_finite_errors(self, data: dict[str, Any]) -> Iterator[ValidationError]:
        for path in _NUMERIC_FIELDS[self.form]:
            value: Any = data
            for key in path:
                value = value[key]

            if not math.isfinite(value):
                yield ValidationError(
                    f"{value!r} is not a finite number",
                    validator="finite",
                    path=path,
                    instance=value,
                )

    def _zero_magnitude_errors(self, data: dict[str, Any]) -> Iterator[ValidationError]:
        angle_value = data["angle"]["value"]
        if data["magnitude"] == 0 and angle_value != 0:
            yield ValidationError(
                f"zero magnitude requires a zero angle, got {angle_value!r}",
                validator="canonicalZero",
                path=("angle", "value"),
                instance=angle_value,
            )


@lru_cache(maxsize=None)
def contract_for(form: str) -> ComplexFormContract:
    """
    Контракт по значению поля "form".

    Raises:
        ValueError: Если форма неизвестна
    """
    return ComplexFormContract(form)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex(data: dict[str, Any]) -> str:
    """
    Валидация документа любой формы по полю "form".

    Returns:
        Имя формы документа

    Raises:
        ValueError: Если форма неизвестна
        ValidationError: Если документ нарушает контракт формы
    """
    form = data.get("form")
    if form not in FORMS:
        raise ValueError(f"Unknown complex number form: {form!r}")

    contract_for(form).validate(data)
    return form


def validate_rectangular_form(data: dict[str, Any]) -> None:
    contract_for("rectangular").validate(data)


def validate_polar_form(data: dict[str, Any]) -> None:
    contract_for("polar").validate(data)
