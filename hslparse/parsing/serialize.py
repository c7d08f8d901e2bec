from __future__ import annotations
import math
from typing import Optional, Sequence, Union

import numpy as np

from ..types.hsl_types import ALPHA_MAX, ParsedHSL


def _format_number(value: float, precision: Optional[int]) -> str:
    # Positional notation only, the grammar has no exponents
    if precision is None:
        return np.format_float_positional(value, trim="-")
    return np.format_float_positional(value, precision=precision, unique=False, trim="-")


def _channels(color: Union[ParsedHSL, Sequence[float]]) -> tuple[float, float, float, float]:
    if isinstance(color, ParsedHSL):
        return color.as_tuple()
    try:
        values = tuple(float(c) for c in color)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Color must be a ParsedHSL or a sequence of numbers, got {color!r}") from e
    if len(values) != 4:
        raise ValueError(f"Expected 4 channels (h, s, l, a), got {len(values)}")
    return values


def format_hsl(
    color: Union[ParsedHSL, Sequence[float]],
    legacy: bool = False,
    precision: Optional[int] = None,
) -> str:
    """
    Build a CSS HSL string from normalized components.

    Args:
        color: ParsedHSL or (h, s, l, a)
        legacy: Use the comma separated hsl()/hsla() syntax instead of the space separated one
        precision: Fixed number of decimals, or None for the shortest exact representation

    Returns:
        e.g. "hsl(120 50% 50% / 0.5)" or "hsla(120, 50%, 50%, 0.5)"; alpha is left out when it is 1
    """
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    channels = _channels(color)
    if not all(math.isfinite(c) for c in channels):
        raise ValueError(f"Channels must be finite, got {channels}")

    h, s, l, a = (_format_number(c, precision) for c in channels)
    has_alpha = channels[3] != ALPHA_MAX

    if legacy:
        if has_alpha:
            return f"hsla({h}, {s}%, {l}%, {a})"
        return f"hsl({h}, {s}%, {l}%)"
    if has_alpha:
        return f"hsl({h} {s}% {l}% / {a})"
    return f"hsl({h} {s}% {l}%)"
