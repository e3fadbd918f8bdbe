"""
ReconstructionCase — один набор shares для восстановления секрета

Immutable Pydantic модели входного документа:
- ThresholdKeys: дескриптор порога {n, k}
- EncodedShare: закодированная точка {base, value}
- ReconstructionCase: порог + shares по числовым меткам

Метки shares сортируются по числовому значению (по возрастанию), для
интерполяции берутся первые k. Остальные shares игнорируются.
"""

import re
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.domain.point import Point
from src.core.math.radix import decode

# Поле с дескриптором порога; все остальные поля документа — shares
THRESHOLD_FIELD: Final[str] = "keys"

_LABEL_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")
_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingThresholdError(ValueError):
    """Отсутствует или невалиден дескриптор порога keys.{n, k}."""


class InsufficientSharesError(ValueError):
    """Shares меньше, чем требует порог k."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"threshold k={required} exceeds available shares ({available})")


# =============================================================================
# MODELS
# =============================================================================


class ThresholdKeys(BaseModel):
    """
    Дескриптор порога.

    k принимается как целое число >= 1 или строка из цифр ("3"); bool и
    строки с пробелами/знаком отклоняются. Значения порога проверяются
    только здесь: контракт reconstruction_case.json требует лишь объект keys.
    n носит информационный характер и в вычислениях не участвует: целое
    или строка с целым сохраняется как int, любое другое значение — None.
    """

    n: int | None = Field(..., description="Общее количество shares (информационно)")
    k: int = Field(..., ge=1, description="Порог: количество shares для восстановления")

    model_config = {"frozen": True}

    @field_validator("k", mode="before")
    @classmethod
    def validate_k_integer_like(cls, v: Any) -> Any:
        """Только int или строка из цифр"""
        if isinstance(v, bool):
            raise ValueError("k must be an integer, got a boolean")
        if isinstance(v, str) and not _DIGITS_PATTERN.fullmatch(v):
            raise ValueError(f"k must be a string of digits, got {v!r}")
        return v

    @field_validator("n", mode="before")
    @classmethod
    def coerce_informational_n(cls, v: Any) -> int | None:
        """Целое значение или None"""
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, str) and _LABEL_PATTERN.fullmatch(v):
            return int(v)
        return None


class EncodedShare(BaseModel):
    """Share в виде строки цифр в системе счисления base."""

    base: int = Field(..., description="Основание системы счисления")
    value: str = Field(..., min_length=1, description="Строка цифр (0-9, a-z)")

    model_config = {"frozen": True}

    def decode(self, strict: bool = True) -> int:
        """Декодирование value в точное целое."""
        return decode(self.value, self.base, strict=strict)


class ReconstructionCase(BaseModel):
    """
    Набор shares с порогом.

    shares хранятся под исходными строковыми метками: разные записи одной
    координаты ("1" и "01") не схлопываются и доходят до интерполятора
    как дубликаты x.
    """

    keys: ThresholdKeys
    shares: dict[str, EncodedShare] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("shares")
    @classmethod
    def validate_share_labels(cls, v: dict[str, EncodedShare]) -> dict[str, EncodedShare]:
        """Проверка, что все метки — целые числа"""
        for label in v:
            if not _LABEL_PATTERN.fullmatch(label):
                raise ValueError(f"share label must be an integer, got {label!r}")
        return v

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ReconstructionCase":
        """
        Построение из сырого JSON объекта.

        Args:
            raw: Объект вида {"keys": {"n": ..., "k": ...}, "<label>": {"base": ..., "value": ...}, ...}

        Returns:
            ReconstructionCase

        Raises:
            MissingThresholdError: Если keys.{n, k} отсутствует или невалиден
            ValidationError: Если shares структурно некорректны
        """
        threshold = extract_threshold(raw)
        shares = {label: entry for label, entry in raw.items() if label != THRESHOLD_FIELD}
        return cls.model_validate({"keys": threshold, "shares": shares})

    @property
    def threshold(self) -> int:
        return self.keys.k

    def ordered_labels(self) -> list[str]:
        """Все метки по возрастанию числового значения (стабильно)."""
        return sorted(self.shares, key=int)

    def selected_labels(self) -> list[str]:
        """
        Первые k меток по возрастанию числового значения.

        Raises:
            InsufficientSharesError: Если shares меньше k
        """
        labels = self.ordered_labels()
        if len(labels) < self.threshold:
            raise InsufficientSharesError(self.threshold, len(labels))
        return labels[: self.threshold]

    def select_points(self, strict: bool = True) -> list[Point]:
        """
        Декодирование выбранных shares в точки интерполяции.

        Args:
            strict: Строгая валидация base и цифр (см. radix.decode)

        Returns:
            k точек в порядке возрастания меток

        Raises:
            InsufficientSharesError: Если shares меньше k
            RadixError: Если share не декодируется
        """
        return [
            Point(x=int(label), y=self.shares[label].decode(strict=strict))
            for label in self.selected_labels()
        ]


# =============================================================================
# HELPERS
# =============================================================================


def extract_threshold(raw: Mapping[str, Any]) -> ThresholdKeys:
    """
    Извлечение дескриптора порога из сырого объекта.

    Raises:
        MissingThresholdError: Если keys отсутствует, не объект,
            не содержит n/k или k не является целым >= 1
    """
    keys = raw.get(THRESHOLD_FIELD)

    if not isinstance(keys, Mapping):
        raise MissingThresholdError(f"case has no '{THRESHOLD_FIELD}' descriptor")

    missing = [name for name in ("n", "k") if keys.get(name) is None]
    if missing:
        raise MissingThresholdError(
            f"'{THRESHOLD_FIELD}' descriptor is missing {', '.join(missing)}"
        )

    try:
        return ThresholdKeys.model_validate(dict(keys))
    except ValidationError as e:
        raise MissingThresholdError(f"invalid '{THRESHOLD_FIELD}' descriptor: {e}") from e
