"""
BaseDimension — неприводимый именованный атом размерности

Immutable Pydantic модель. Две базы равны, если равны их имена:
независимо созданные BaseDimension("length") сворачиваются в один
слот при канонизации размерности.
"""

from pydantic import BaseModel, Field


class BaseDimension(BaseModel):
    """Именованная базовая размерность (например, 'length')."""

    name: str = Field(..., min_length=1, description="Имя базовой размерности")

    model_config = {"frozen": True}  # Immutable

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"BaseDimension(name={self.name!r})"
