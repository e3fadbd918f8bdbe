"""
Exact Fractions — точная рациональная арифметика на int

Дроби хранятся как пара (numerator, denominator) произвольной точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После reduce_fraction / add_fractions знаменатель всегда > 0
2. После reduce_fraction / add_fractions gcd(|numerator|, denominator) ∈ {0, 1}
3. Никаких float: все операции точные и детерминированные

gcd реализован итеративно (без рекурсии), глубина стека не зависит от входа.
"""

from typing import Final, NamedTuple


class ExactFraction(NamedTuple):
    """
    Дробь numerator / denominator.

    Корректно сокращённая дробь имеет denominator > 0 и взаимно простые
    компоненты. Сравнение через == сравнивает представления; для
    математического равенства используйте fractions_equal.
    """

    numerator: int
    denominator: int


ZERO: Final[ExactFraction] = ExactFraction(0, 1)


# =============================================================================
# GCD / REDUCE
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида по модулям).

    Args:
        a: Первое число (любого знака)
        b: Второе число (любого знака)

    Returns:
        gcd(|a|, |b|) >= 0; gcd(0, 0) == 0

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(0, 0)
        0
    """
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def reduce_fraction(numerator: int, denominator: int) -> ExactFraction:
    """
    Сокращение дроби с нормализацией знака.

    Алгоритм:
    1. denominator < 0 → меняем знак у обеих компонент
    2. g = gcd(|numerator|, denominator)
    3. g != 0 → делим обе компоненты на g
    4. g == 0 (только 0/0, вырожденный случай) → пара без изменений

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Сокращённая ExactFraction

    Examples:
        >>> reduce_fraction(6, -4)
        ExactFraction(numerator=-3, denominator=2)
        >>> reduce_fraction(0, 7)
        ExactFraction(numerator=0, denominator=1)
    """
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    g = gcd(numerator, denominator)
    if g != 0:
        numerator //= g
        denominator //= g

    return ExactFraction(numerator, denominator)


# =============================================================================
# ARITHMETIC
# =============================================================================


def add_fractions(a: ExactFraction, b: ExactFraction) -> ExactFraction:
    """
    Сумма двух дробей: (n1*d2 + n2*d1) / (d1*d2), затем сокращение.

    Examples:
        >>> add_fractions(ExactFraction(1, 2), ExactFraction(1, 3))
        ExactFraction(numerator=5, denominator=6)
        >>> add_fractions(ExactFraction(1, 2), ExactFraction(-1, 2))
        ExactFraction(numerator=0, denominator=1)
    """
    n1, d1 = a
    n2, d2 = b
    return reduce_fraction(n1 * d2 + n2 * d1, d1 * d2)


def fractions_equal(a: ExactFraction, b: ExactFraction) -> bool:
    """Равенство дробей через перекрёстное умножение (n1*d2 == n2*d1)."""
    return a.numerator * b.denominator == b.numerator * a.denominator
