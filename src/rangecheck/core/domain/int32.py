"""
Int32 — Границы и разбор 32-битных знаковых целых

Единственный допустимый способ превратить текстовый токен в границу интервала.
Все операнды CLI проходят через parse_int32 до конструирования ClosedRange.
"""

from typing import Final


# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotANumber(Exception):
    """
    Токен не является 32-битным знаковым целым.

    Возникает на этапе разбора аргументов, до конструирования интервала.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"'{token}' is not a valid 32-bit signed integer")


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_int32(value: object) -> bool:
    """
    Проверка, что значение является int в 32-битном диапазоне.

    bool отвергается, хотя формально является подклассом int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return INT32_MIN <= value <= INT32_MAX


def parse_int32(token: str) -> int:
    """
    Разбор токена в 32-битное знаковое целое.

    Допускается только ведущий знак ('+' или '-') и ASCII-цифры.
    Пробелы, дробные, экспоненциальные и пустые записи отвергаются.

    Args:
        token: Текстовый токен (например, '-15')

    Returns:
        Целое значение

    Raises:
        NotANumber: Если токен не целое или вне [INT32_MIN, INT32_MAX]

    Examples:
        >>> parse_int32("42")
        42
        >>> parse_int32("-2147483648")
        -2147483648
    """
    digits = token[1:] if token[:1] in ("+", "-") else token

    # int() принимает '1_000' и не-ASCII цифры, поэтому проверяем явно
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise NotANumber(token)

    value = int(token)
    if not is_int32(value):
        raise NotANumber(token)

    return value
