"""
Exceptions — ошибки комплексной арифметики

Ошибки возвращаются вызывающему явно и никогда не заменяются на NaN/Inf.
Все операции детерминированы: повторный вызов с теми же аргументами
завершится той же ошибкой, поэтому retry-логики нет.

Иерархия:
    ComplexArithmeticError (ArithmeticError)
    ├── DivisionByZero (ZeroDivisionError)
    │   └── DegenerateLogBase (также DomainError)
    ├── DomainError (ValueError)
    │   └── DegenerateLogBase
    └── InvalidRoot (ValueError)
"""


class ComplexArithmeticError(ArithmeticError):
    """Базовая ошибка операций над комплексными числами."""

    pass


class DivisionByZero(ComplexArithmeticError, ZeroDivisionError):
    """
    Делитель с нулевым модулем.

    Возникает в divide/reciprocal при делителе (0, 0), а также в log,
    когда знаменатель ln(base) обращается в точный ноль.
    """

    pass


class DomainError(ComplexArithmeticError, ValueError):
    """
    Аргумент вне области определения операции.

    - ln/log/log10 от числа с нулевым модулем
    - power с z = 0 и Re(w) <= 0 (включая 0^0)
    - результат операции не представим конечным float (переполнение)
    """

    pass


class DegenerateLogBase(DivisionByZero, DomainError):
    """
    Логарифм по основанию 1: ln(base) == 0.

    Одновременно DivisionByZero (знаменатель ln(base) равен нулю)
    и DomainError (основание вне области определения log_b).
    """

    pass


class InvalidRoot(ComplexArithmeticError, ValueError):
    """Степень корня не является целым числом n >= 1."""

    pass
