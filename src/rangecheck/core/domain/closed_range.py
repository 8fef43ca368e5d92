"""
ClosedRange — Модель замкнутого целочисленного интервала [lower, upper]

Immutable Pydantic модель. Инвариант lower <= upper проверяется один раз,
при конструировании; после этого экземпляр не меняется.

Операции:
- contains(value): принадлежность значения (включая обе границы)
- is_subset(other): является ли интервал подмножеством other
- render(): текстовое представление '[lower, upper]'
- ==: структурное равенство по обеим границам
"""

from typing import Any, Dict, Final

from pydantic import BaseModel, Field, field_validator

from rangecheck.core.domain.int32 import INT32_MAX, INT32_MIN


# =============================================================================
# СООБЩЕНИЯ
# =============================================================================
INVALID_RANGE_MESSAGE: Final[str] = (
    "lower bound is greater than upper bound, so it is not a valid closed range"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRange(Exception):
    """
    Нижняя граница больше верхней: [lower, upper] не является замкнутым интервалом.

    Наследуется от Exception, а не от ValueError, поэтому Pydantic не
    оборачивает её в ValidationError и вызывающий код получает её напрямую.
    """

    def __init__(self, lower: int, upper: int):
        self.lower = lower
        self.upper = upper
        super().__init__(INVALID_RANGE_MESSAGE)


# =============================================================================
# CLOSED RANGE MODEL
# =============================================================================


class ClosedRange(BaseModel):
    """
    Замкнутый интервал целых чисел [lower, upper].

    Immutable модель (frozen=True): равенство структурное, экземпляры хешируемы.

    model_construct() не выполняет валидацию и предназначен только для
    доверенных данных (например, уже проверенных границ).
    """

    lower: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, strict=True, description="Нижняя граница (включительно)"
    )
    upper: int = Field(
        ..., ge=INT32_MIN, le=INT32_MAX, strict=True, description="Верхняя граница (включительно)"
    )

    model_config = {"frozen": True}

    @field_validator("upper")
    @classmethod
    def validate_bounds_order(cls, v: int, info) -> int:
        """Проверка, что lower <= upper"""
        if "lower" in info.data:
            lower = info.data["lower"]
            if lower > v:
                raise InvalidRange(lower, v)
        return v

    @classmethod
    def from_bounds(cls, lower: int, upper: int) -> "ClosedRange":
        """
        Конструирование по позиционным границам.

        Raises:
            InvalidRange: Если lower > upper
        """
        return cls(lower=lower, upper=upper)

    def model_copy(
        self, *, update: Dict[str, Any] | None = None, deep: bool = False
    ) -> "ClosedRange":
        """
        Копия интервала.

        При update новые границы проходят ту же валидацию, что и конструктор.

        Raises:
            InvalidRange: Если после update lower > upper
        """
        if update:
            return self.model_validate({**self.model_dump(), **update})
        return super().model_copy(deep=deep)

    def contains(self, value: int) -> bool:
        """
        Принадлежность значения интервалу.

        Returns:
            True если lower <= value <= upper
        """
        return self.lower <= value <= self.upper

    def is_subset(self, other: "ClosedRange") -> bool:
        """
        Является ли интервал подмножеством other.

        self — кандидат в подмножество, other — кандидат в надмножество.
        Отношение рефлексивно, но не симметрично.

        Returns:
            True если other.lower <= self.lower и self.upper <= other.upper
        """
        return other.lower <= self.lower and self.upper <= other.upper

    def render(self) -> str:
        """Текстовое представление '[lower, upper]'"""
        return f"[{self.lower}, {self.upper}]"

    def __str__(self) -> str:
        return self.render()

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ClosedRange):
            return item.is_subset(self)
        if isinstance(item, bool) or not isinstance(item, int):
            return False
        return self.contains(item)
