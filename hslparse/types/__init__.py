from .hsl_types import (
    AngleUnit,
    AlphaForm,
    RawHSL,
    ParsedHSL,
    HUE_360,
    PERCENT_MAX,
    ALPHA_MAX,
    MIN_HSL_LENGTH,
)

__all__ = [
    "AngleUnit",
    "AlphaForm",
    "RawHSL",
    "ParsedHSL",
    "HUE_360",
    "PERCENT_MAX",
    "ALPHA_MAX",
    "MIN_HSL_LENGTH",
]
