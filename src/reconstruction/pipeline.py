"""Reconstruction Pipeline — восстановление секретов по набору cases

Чистая обработка: на входе уже разобранные JSON объекты, на выходе
упорядоченный список CaseOutcome. Чтение файла и печать — в cli.

Порядок обработки одного case:
1. keys.{n, k} отсутствует/невалиден → SKIPPED (обработка продолжается)
2. Контракт reconstruction_case → MalformedInputError (фатально)
3. Выбор первых k меток по возрастанию, декодирование shares
4. Интерполяция в нуле → RECONSTRUCTED
5. Ошибки интерполяции/декодирования → фатально, либо FAILED
   при isolate_case_failures
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from jsonschema import ValidationError as ContractViolation
from pydantic import ValidationError

from src.core.contracts import reconstruction_case_violations, validate_reconstruction_input
from src.core.domain.reconstruction_case import (
    InsufficientSharesError,
    MissingThresholdError,
    ReconstructionCase,
    extract_threshold,
)
from src.core.math.lagrange import InterpolationError, interpolate_at_zero
from src.core.math.radix import RadixError

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedInputError(ValueError):
    """Входной документ структурно некорректен. Фатально для всего запуска."""


# Ошибки, относящиеся к одному case (без подстановки значения)
CASE_FAILURES = (InterpolationError, InsufficientSharesError, RadixError)


# =============================================================================
# ENUMS / RESULT
# =============================================================================


class CaseStatus(str, Enum):
    """Итог обработки case."""

    RECONSTRUCTED = "RECONSTRUCTED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class CaseOutcome:
    """Результат обработки одного case."""

    index: int
    status: CaseStatus
    secret: int | None
    reason: str = ""


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReconstructionConfig:
    """Конфигурация pipeline.

    strict_radix: валидировать base ∈ [2, 36] и цифры < base
    isolate_case_failures: ошибка одного case не прерывает запуск,
        case помечается FAILED и не попадает в вывод
    """

    strict_radix: bool = True
    isolate_case_failures: bool = False


# =============================================================================
# PIPELINE
# =============================================================================


def parse_input_document(text: str) -> list[dict[str, Any]]:
    """
    Разбор входного JSON документа в список cases.

    Args:
        text: Содержимое входного файла

    Returns:
        Список объектов cases (один объект оборачивается в список)

    Raises:
        MalformedInputError: Невалидный JSON или структура вне контракта
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"error parsing JSON input: {e}") from e

    try:
        validate_reconstruction_input(document)
    except ContractViolation as e:
        raise MalformedInputError(f"invalid test case structure: {e.message}") from e

    if isinstance(document, list):
        return document
    return [document]


def reconstruct_case(raw: dict[str, Any], config: ReconstructionConfig | None = None) -> int:
    """
    Восстановление секрета одного case.

    Raises:
        MissingThresholdError: keys.{n, k} отсутствует/невалиден
        MalformedInputError: shares не соответствуют контракту
        InsufficientSharesError, RadixError, InterpolationError: ошибка case
    """
    config = config or ReconstructionConfig()

    extract_threshold(raw)

    violations = reconstruction_case_violations(raw)
    if violations:
        raise MalformedInputError(f"malformed share: {'; '.join(violations)}")

    try:
        case = ReconstructionCase.from_raw(raw)
    except ValidationError as e:
        raise MalformedInputError(f"malformed case: {e}") from e

    points = case.select_points(strict=config.strict_radix)
    return interpolate_at_zero(points)


def process_cases(
    cases: Iterable[dict[str, Any]],
    config: ReconstructionConfig | None = None,
) -> list[CaseOutcome]:
    """
    Последовательная обработка cases в порядке входа.

    Args:
        cases: Разобранные объекты cases
        config: Конфигурация (default: ReconstructionConfig())

    Returns:
        CaseOutcome для каждого case, в порядке входа

    Raises:
        MalformedInputError: Структурная ошибка (всегда фатально)
        InterpolationError, InsufficientSharesError, RadixError:
            если isolate_case_failures выключен
    """
    config = config or ReconstructionConfig()
    outcomes: list[CaseOutcome] = []

    for index, raw in enumerate(cases):
        try:
            secret = reconstruct_case(raw, config)
        except MissingThresholdError as e:
            logger.warning("Test case %d missing 'keys' information, skipped: %s", index, e)
            outcomes.append(CaseOutcome(index, CaseStatus.SKIPPED, None, str(e)))
            continue
        except CASE_FAILURES as e:
            if not config.isolate_case_failures:
                raise
            logger.error("Test case %d failed: %s", index, e)
            outcomes.append(CaseOutcome(index, CaseStatus.FAILED, None, str(e)))
            continue

        logger.debug("Test case %d reconstructed", index)
        outcomes.append(CaseOutcome(index, CaseStatus.RECONSTRUCTED, secret))

    return outcomes


def reconstruct_secrets(
    cases: Iterable[dict[str, Any]],
    config: ReconstructionConfig | None = None,
) -> list[int]:
    """Секреты успешно восстановленных cases, в порядке входа."""
    return [
        outcome.secret
        for outcome in process_cases(cases, config)
        if outcome.status is CaseStatus.RECONSTRUCTED
    ]


def format_secrets(secrets: Sequence[int]) -> str:
    """Десятичные строки секретов, разделённые переводом строки."""
    return "\n".join(str(secret) for secret in secrets)
