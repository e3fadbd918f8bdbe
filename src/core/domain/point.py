"""
Point — точка (x, y) для интерполяции

Immutable Pydantic модель. x берётся из числовой метки share,
y — декодированное значение произвольной точности.
"""

from pydantic import BaseModel, Field


class Point(BaseModel):
    """Точка полинома: x — координата, y — значение (int без ограничения разрядности)."""

    x: int = Field(..., description="Координата (числовая метка share)")
    y: int = Field(..., description="Значение полинома в точке x")

    model_config = {"frozen": True}
