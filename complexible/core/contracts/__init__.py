"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных комплексных чисел.
"""

from .validators import (
    FORMS,
    SCHEMA_DIR,
    ComplexFormContract,
    contract_for,
    load_schema,
    validate_complex,
    validate_polar_form,
    validate_rectangular_form,
)

__all__ = [
    # Constants
    "FORMS",
    "SCHEMA_DIR",
    # Classes
    "ComplexFormContract",
    # Functions
    "load_schema",
    "contract_for",
    "validate_complex",
    "validate_rectangular_form",
    "validate_polar_form",
]
