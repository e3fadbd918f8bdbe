"""
Тесты для Lagrange Interpolation at Zero

Проверяемые инварианты:
1. Точное восстановление свободного члена полинома степени < k
2. Независимость от порядка точек
3. Дубликаты x → DuplicateCoordinateError (до арифметики)
4. Нецелый результат → NonIntegerResultError (без подстановки)
5. Пустой вход → InsufficientPointsError
"""

import itertools
import random

import pytest

from src.core.domain.point import Point
from src.core.math.exact_fractions import ExactFraction
from src.core.math.lagrange import (
    DuplicateCoordinateError,
    InsufficientPointsError,
    InterpolationError,
    NonIntegerResultError,
    interpolate_at_zero,
    interpolate_fraction_at_zero,
)


# =============================================================================
# HELPERS
# =============================================================================


def evaluate_polynomial(coefficients: list[int], x: int) -> int:
    """Схема Горнера; coefficients[0] — свободный член."""
    result = 0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


def make_points(coefficients: list[int], xs: list[int]) -> list[Point]:
    return [Point(x=x, y=evaluate_polynomial(coefficients, x)) for x in xs]


# =============================================================================
# ТЕСТЫ: восстановление
# =============================================================================


class TestInterpolateAtZero:
    """Восстановление свободного члена."""

    def test_quadratic_reference_scenario(self):
        """(1, 4), (2, 7), (3, 12) лежат на y = x^2 + 3 → 3."""
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)]
        assert interpolate_at_zero(points) == 3

    def test_single_point_is_constant(self):
        """k = 1: полином-константа."""
        assert interpolate_at_zero([Point(x=5, y=42)]) == 42

    def test_linear(self):
        """y = 2x + 1 по двум точкам."""
        assert interpolate_at_zero([Point(x=1, y=3), Point(x=4, y=9)]) == 1

    def test_point_at_zero(self):
        """Если x = 0 среди точек, результат — её y."""
        points = make_points([17, -3, 2], [0, 5, 9])
        assert interpolate_at_zero(points) == 17

    def test_negative_constant_and_coordinates(self):
        points = make_points([-123456, 7, -5, 1], [-4, -1, 2, 11])
        assert interpolate_at_zero(points) == -123456

    def test_non_consecutive_coordinates(self):
        points = make_points([99, 0, 4], [2, 6, 13])
        assert interpolate_at_zero(points) == 99

    def test_big_integer_secret(self):
        """Секрет за пределами 64 бит восстанавливается точно."""
        secret = 2**521 - 1
        coefficients = [secret, 3**200, -(5**150), 7**100]
        points = make_points(coefficients, [1, 2, 3, 4])
        assert interpolate_at_zero(points) == secret

    def test_random_polynomials(self):
        """Случайные полиномы степени < k восстанавливаются из любых k различных x."""
        rng = random.Random(20240607)
        for _ in range(40):
            k = rng.randint(1, 8)
            coefficients = [rng.randint(-(10**30), 10**30) for _ in range(k)]
            xs = rng.sample(range(-50, 51), k)
            points = make_points(coefficients, xs)
            assert interpolate_at_zero(points) == coefficients[0]

    def test_lower_degree_polynomial_with_extra_points(self):
        """Больше точек, чем требует степень, — результат тот же."""
        points = make_points([8, 1], [1, 2, 3, 4, 5])
        assert interpolate_at_zero(points) == 8

    def test_order_invariance(self):
        """Перестановка точек не меняет результат."""
        points = make_points([31, -2, 5, 1], [1, 3, 4, 7])
        for permutation in itertools.permutations(points):
            assert interpolate_at_zero(list(permutation)) == 31

    def test_accepts_tuple_sequence(self):
        points = tuple(make_points([6, 6], [1, 2]))
        assert interpolate_at_zero(points) == 6


# =============================================================================
# ТЕСТЫ: ошибки
# =============================================================================


class TestInterpolationErrors:
    """Ошибки интерполяции."""

    def test_duplicate_coordinate_rejected(self):
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=1, y=4)]
        with pytest.raises(DuplicateCoordinateError, match=r"\[1\]") as exc_info:
            interpolate_at_zero(points)
        assert exc_info.value.duplicates == [1]

    def test_duplicate_coordinate_with_different_values(self):
        """Дубликат x с другим y тоже отклоняется, а не даёт целое число."""
        points = [Point(x=2, y=7), Point(x=2, y=100), Point(x=3, y=12)]
        with pytest.raises(DuplicateCoordinateError):
            interpolate_at_zero(points)

    def test_duplicate_rejected_in_fraction_variant(self):
        with pytest.raises(DuplicateCoordinateError):
            interpolate_fraction_at_zero([Point(x=3, y=1), Point(x=3, y=1)])

    def test_non_integer_result(self):
        """(1, 0), (3, 1): прямая через них даёт f(0) = -1/2."""
        points = [Point(x=1, y=0), Point(x=3, y=1)]
        with pytest.raises(NonIntegerResultError, match="-1/2") as exc_info:
            interpolate_at_zero(points)
        assert exc_info.value.fraction == ExactFraction(-1, 2)

    def test_empty_points(self):
        with pytest.raises(InsufficientPointsError):
            interpolate_at_zero([])

    def test_error_hierarchy(self):
        for error in (DuplicateCoordinateError, NonIntegerResultError, InsufficientPointsError):
            assert issubclass(error, InterpolationError)
        assert issubclass(InterpolationError, ValueError)


class TestInterpolateFractionAtZero:
    """Дробный вариант без проверки целочисленности."""

    def test_returns_reduced_fraction(self):
        points = [Point(x=1, y=0), Point(x=3, y=1)]
        assert interpolate_fraction_at_zero(points) == ExactFraction(-1, 2)

    def test_integer_result_has_unit_denominator(self):
        points = [Point(x=1, y=4), Point(x=2, y=7), Point(x=3, y=12)]
        assert interpolate_fraction_at_zero(points) == ExactFraction(3, 1)

    def test_denominator_always_positive(self):
        rng = random.Random(5)
        for _ in range(20):
            xs = rng.sample(range(-20, 21), 3)
            points = [Point(x=x, y=rng.randint(-1000, 1000)) for x in xs]
            result = interpolate_fraction_at_zero(points)
            assert result.denominator > 0
