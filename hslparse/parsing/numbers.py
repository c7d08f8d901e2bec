from __future__ import annotations
import math
from typing import Optional

from boundednumbers.functions import clamp

from ..types.hsl_types import (
    ALPHA_MAX,
    HUE_360,
    PERCENT_MAX,
    AlphaForm,
    AngleUnit,
    ParsedHSL,
    RawHSL,
)


def clamp_range(raw: str | float, lower: float = 0.0, upper: float = PERCENT_MAX) -> float:
    """Parse a numeric token and restrict it to [lower, upper]."""
    # +0.0 turns a negative zero into 0.0
    return float(clamp(float(raw), lower, upper)) + 0.0


def hue_to_degrees(raw: str | float, unit: AngleUnit = AngleUnit.NONE) -> float:
    """Convert a hue token in the given unit to degrees (not yet wrapped)."""
    return float(raw) * unit.factor


def normalize_hue(h: float) -> float:
    """
    Wrap a hue in degrees into [0, 360).

    Negative hues wrap backwards (-10 -> 350). A hue too large to be
    represented as a finite float collapses to 0.
    """
    if not math.isfinite(h):
        return 0.0
    return (h % HUE_360 + HUE_360) % HUE_360


def alpha_form(raw: Optional[str]) -> AlphaForm:
    if raw is None:
        return AlphaForm.ABSENT
    if raw.endswith("%"):
        return AlphaForm.PERCENTAGE
    return AlphaForm.NUMBER


def resolve_alpha(raw: Optional[str]) -> float:
    """
    Resolve an alpha token to [0, 1].

    Args:
        raw: Alpha token as matched, e.g. "0.5" or "50%", or None when omitted

    Returns:
        1.0 when omitted, the percentage divided by 100, or the number clamped to [0, 1]
    """
    form = alpha_form(raw)
    if form is AlphaForm.ABSENT:
        return ALPHA_MAX
    if form is AlphaForm.PERCENTAGE:
        return clamp_range(raw[:-1], 0.0, PERCENT_MAX) / PERCENT_MAX
    return clamp_range(raw, 0.0, ALPHA_MAX)


def normalize(raw: RawHSL) -> ParsedHSL:
    """Turn the raw tokens of a matched string into a normalized color."""
    return ParsedHSL(
        h=normalize_hue(hue_to_degrees(raw.hue, raw.unit)),
        s=clamp_range(raw.saturation),
        l=clamp_range(raw.lightness),
        a=resolve_alpha(raw.alpha),
    )
