"""
Radix Decoder — позиционное декодирование строк в произвольной системе счисления

Модуль переводит строку цифр (0-9, a-z без учёта регистра) в точное
целое число Python (arbitrary precision).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат точный: используется int без ограничения разрядности
2. Цифры обрабатываются слева направо (старший разряд первым)
3. strict=True: base ∈ [MIN_BASE, MAX_BASE] и каждая цифра < base
4. strict=False: permissive режим, цифры накапливаются как есть

ФОРМУЛА:
    result = (...((d_0 * base + d_1) * base + d_2) ...) * base + d_{m-1}
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Минимальное основание системы счисления в strict режиме
MIN_BASE: Final[int] = 2

# Максимальное основание: 10 цифр + 26 букв
MAX_BASE: Final[int] = 36


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RadixError(ValueError):
    """Базовая ошибка декодирования строки цифр."""


class InvalidBaseError(RadixError):
    """Основание системы счисления вне допустимого диапазона."""


class InvalidDigitError(RadixError):
    """Символ не является цифрой или значение цифры >= base."""


# =============================================================================
# DECODING
# =============================================================================


def digit_value(char: str) -> int:
    """
    Значение одной цифры.

    '0'..'9' → 0..9, буквы (без учёта регистра) → 10 + смещение от 'a'.

    Args:
        char: Один символ

    Returns:
        Значение цифры в диапазоне [0, 35]

    Raises:
        InvalidDigitError: Если символ не является цифрой 0-9 или буквой a-z

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("f")
        15
        >>> digit_value("Z")
        35
    """
    if len(char) != 1:
        raise InvalidDigitError(f"expected a single character, got {char!r}")

    if "0" <= char <= "9":
        return ord(char) - ord("0")

    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10

    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10

    raise InvalidDigitError(f"invalid digit {char!r}")


def validate_base(base: int, strict: bool = True) -> None:
    """
    Валидация основания системы счисления.

    Args:
        base: Основание
        strict: True → base ∈ [MIN_BASE, MAX_BASE]; False → base >= 1

    Raises:
        InvalidBaseError: Если основание недопустимо
    """
    if strict:
        if not (MIN_BASE <= base <= MAX_BASE):
            raise InvalidBaseError(
                f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}"
            )
    elif base < 1:
        raise InvalidBaseError(f"base must be >= 1, got {base}")


def decode(digits: str, base: int, strict: bool = True) -> int:
    """
    Декодирование строки цифр в точное целое число.

    Args:
        digits: Непустая строка цифр (0-9, a-z, A-Z)
        base: Основание системы счисления
        strict: Проверять диапазон base и что каждая цифра < base
            (default: True). False сохраняет permissive поведение:
            цифры >= base накапливаются без ошибки.

    Returns:
        Декодированное значение (int, без переполнения)

    Raises:
        InvalidBaseError: Если основание недопустимо
        InvalidDigitError: Если строка пустая, содержит не-цифру,
            или (strict) цифра >= base

    Examples:
        >>> decode("10", 2)
        2
        >>> decode("ff", 16)
        255
        >>> decode("Z", 36)
        35
        >>> decode("19", 8, strict=False)
        17
    """
    validate_base(base, strict=strict)

    if not digits:
        raise InvalidDigitError("digit string must be non-empty")

    result = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if strict and value >= base:
            raise InvalidDigitError(
                f"digit {char!r} at position {position} is out of range for base {base}"
            )
        result = result * base + value

    return result
