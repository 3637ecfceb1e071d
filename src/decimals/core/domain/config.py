"""
DecimalConfig — конфигурация decimal engine

Immutable Pydantic модель (frozen=True): precision, режимы округления и modulo,
лимиты экспоненты, пороги экспоненциальной нотации.

Конфигурация никогда не мутирует: Engine заменяет её целиком (config_set)
или копирует в новый независимый handle (config_derive).
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from .modes import ModuloMode, RoundingMode


# =============================================================================
# LIMITS
# =============================================================================

# Максимальное число значащих цифр результата
MAX_PRECISION: Final[int] = 1_000_000_000

# Абсолютный лимит экспоненты (|e| <= 9e15)
EXP_LIMIT: Final[int] = 9_000_000_000_000_000

# Defaults
DEFAULT_PRECISION: Final[int] = 20
DEFAULT_EXP_NOTATION_NEG: Final[int] = -7
DEFAULT_EXP_NOTATION_POS: Final[int] = 20

CONFIG_FIELDS: Final[tuple[str, ...]] = (
    "precision",
    "rounding",
    "modulo",
    "min_exponent",
    "max_exponent",
    "exp_notation_neg_threshold",
    "exp_notation_pos_threshold",
    "secure_random",
)


# =============================================================================
# CONFIG MODEL
# =============================================================================


class DecimalConfig(BaseModel):
    """
    Конфигурация decimal engine.

    Инвариант: min_exponent <= 0 <= max_exponent (обеспечивается границами полей).
    """

    precision: int = Field(
        DEFAULT_PRECISION,
        ge=1,
        le=MAX_PRECISION,
        description="Максимум значащих цифр результата операции",
    )
    rounding: RoundingMode = Field(
        RoundingMode.HALF_UP, description="Режим округления по умолчанию"
    )
    modulo: ModuloMode = Field(ModuloMode.DOWN, description="Режим modulo")
    min_exponent: int = Field(
        -EXP_LIMIT,
        ge=-EXP_LIMIT,
        le=0,
        description="Экспонента, ниже которой происходит underflow к нулю",
    )
    max_exponent: int = Field(
        EXP_LIMIT,
        ge=0,
        le=EXP_LIMIT,
        description="Экспонента, выше которой происходит overflow к Infinity",
    )
    exp_notation_neg_threshold: int = Field(
        DEFAULT_EXP_NOTATION_NEG,
        ge=-EXP_LIMIT,
        le=0,
        description="Экспоненты ниже порога форматируются в экспоненциальной нотации",
    )
    exp_notation_pos_threshold: int = Field(
        DEFAULT_EXP_NOTATION_POS,
        ge=0,
        le=EXP_LIMIT,
        description="Экспоненты от порога и выше форматируются в экспоненциальной нотации",
    )
    secure_random: bool = Field(
        False, description="Криптостойкий генератор для random()"
    )

    model_config = {"frozen": True}

    @field_validator("rounding", mode="before")
    @classmethod
    def parse_rounding(cls, v: Any) -> RoundingMode:
        """Имя, short name или wire code → RoundingMode (euclid отклоняется)"""
        return RoundingMode.parse(v)

    @field_validator("modulo", mode="before")
    @classmethod
    def parse_modulo(cls, v: Any) -> ModuloMode:
        """Имя, short name или wire code → ModuloMode"""
        return ModuloMode.parse(v)

    @field_validator(
        "precision",
        "min_exponent",
        "max_exponent",
        "exp_notation_neg_threshold",
        "exp_notation_pos_threshold",
        mode="before",
    )
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        """bool не является целым числом конфигурации"""
        if isinstance(v, bool):
            raise ValueError("boolean is not an integer")
        return v

    def merged(self, options: dict[str, Any]) -> dict[str, Any]:
        """
        Слияние текущих значений с options (неизвестные ключи игнорируются).

        Returns:
            dict со всеми полями конфигурации
        """
        data = self.model_dump()
        for name in CONFIG_FIELDS:
            if name in options:
                data[name] = options[name]
        return data
