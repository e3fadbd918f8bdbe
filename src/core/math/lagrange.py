"""
Lagrange Interpolation at Zero — точное восстановление свободного члена

По k точкам с попарно различными x вычисляет значение единственного
полинома степени < k в точке x = 0, используя только точную
рациональную арифметику (exact_fractions).

ФОРМУЛА:
    f(0) = Σ_i y_i * Π_{j≠i} (-x_j) / Π_{j≠i} (x_i - x_j)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дубликаты x отклоняются до начала вычислений (DuplicateCoordinateError)
2. Каждый term сокращается, аккумулятор пересокращается после сложения
3. Знаменатель результата != 1 → NonIntegerResultError, подстановки нет
4. Результат не зависит от порядка точек
"""

from collections import Counter
from typing import Sequence

from src.core.domain.point import Point
from src.core.math.exact_fractions import (
    ZERO,
    ExactFraction,
    add_fractions,
    reduce_fraction,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InterpolationError(ValueError):
    """Базовая ошибка интерполяции."""


class InsufficientPointsError(InterpolationError):
    """Для интерполяции не передано ни одной точки."""


class DuplicateCoordinateError(InterpolationError):
    """Две или более точки имеют одинаковую координату x."""

    def __init__(self, duplicates: list[int]):
        self.duplicates = duplicates
        super().__init__(f"duplicate x coordinates among points: {duplicates}")


class NonIntegerResultError(InterpolationError):
    """
    Значение в нуле не является целым.

    Означает, что точки не лежат на полиноме с целым свободным членом
    (недостаточно точек или повреждённые данные).
    """

    def __init__(self, fraction: ExactFraction):
        self.fraction = fraction
        super().__init__(
            f"non-integer constant computed: {fraction.numerator}/{fraction.denominator}"
        )


# =============================================================================
# INTERPOLATION
# =============================================================================


def _check_points(points: Sequence[Point]) -> None:
    if not points:
        raise InsufficientPointsError("at least one point is required")

    counts = Counter(point.x for point in points)
    duplicates = sorted(x for x, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateCoordinateError(duplicates)


def interpolate_fraction_at_zero(points: Sequence[Point]) -> ExactFraction:
    """
    Значение интерполяционного полинома в нуле как сокращённая дробь.

    Args:
        points: Точки с попарно различными x

    Returns:
        ExactFraction (denominator > 0, сокращённая)

    Raises:
        InsufficientPointsError: Если points пустой
        DuplicateCoordinateError: Если есть совпадающие x
    """
    _check_points(points)

    accumulator = ZERO

    for i, point_i in enumerate(points):
        numerator_product = 1
        denominator_product = 1
        for j, point_j in enumerate(points):
            if j == i:
                continue
            numerator_product *= -point_j.x
            denominator_product *= point_i.x - point_j.x

        term = reduce_fraction(point_i.y * numerator_product, denominator_product)
        accumulator = add_fractions(accumulator, term)

    return reduce_fraction(accumulator.numerator, accumulator.denominator)


def interpolate_at_zero(points: Sequence[Point]) -> int:
    """
    Восстановление целого свободного члена полинома по точкам.

    Args:
        points: k точек с попарно различными x

    Returns:
        f(0) как точное целое число

    Raises:
        InsufficientPointsError: Если points пустой
        DuplicateCoordinateError: Если есть совпадающие x
        NonIntegerResultError: Если f(0) не целое

    Examples:
        >>> interpolate_at_zero([Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)])
        3
    """
    result = interpolate_fraction_at_zero(points)

    if result.denominator != 1:
        raise NonIntegerResultError(result)

    return result.numerator
