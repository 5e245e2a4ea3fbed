"""
Band — Модель закрытой полосы значений [lower, upper]

Immutable Pydantic модель поверх предикатов src.core.math.thresholds.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.thresholds import did_enter_band, did_exit_band, is_within_band


class Band(BaseModel):
    """
    Полоса значений с включёнными границами.

    Поля упорядочены как аргументы did_enter_band: сначала upper.
    """

    upper: float = Field(..., allow_inf_nan=False, description="Верхняя граница (включительно)")
    lower: float = Field(..., allow_inf_nan=False, description="Нижняя граница (включительно)")

    model_config = {"frozen": True}

    @field_validator("lower")
    @classmethod
    def validate_lower_not_above_upper(cls, v: float, info) -> float:
        """Проверка, что lower <= upper."""
        if "upper" in info.data and v > info.data["upper"]:
            raise ValueError(
                f"lower {v} must be <= upper {info.data['upper']}"
            )
        return v

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return is_within_band(self.upper, self.lower, value)

    def did_enter(self, previous: float, current: float) -> bool:
        """Переход previous → current вошёл в полосу через одну из границ."""
        return did_enter_band(self.upper, self.lower)(previous, current)

    def did_exit(self, previous: float, current: float) -> bool:
        """Переход previous → current вышел из полосы через одну из границ."""
        return did_exit_band(self.upper, self.lower)(previous, current)
