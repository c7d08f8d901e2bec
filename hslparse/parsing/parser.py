from __future__ import annotations
from typing import Any, Optional, Union

import numpy as np
from numpy import ndarray as NDArray

from ..types.hsl_types import MIN_HSL_LENGTH, HSLTuple, ParsedHSL, RawHSL
from .grammar import match_hsl
from .numbers import normalize


def _match(value: Any) -> Optional[RawHSL]:
    if not isinstance(value, str):
        return None
    text = value.strip()
    # Nothing shorter than hsl(0 0%0%) can match, skip the regex
    if len(text) < MIN_HSL_LENGTH:
        return None
    return match_hsl(text)


def is_valid(value: Any) -> bool:
    """
    Test if a value is a valid HSL / HSLA color string.

    Surrounding whitespace is ignored. Anything that is not a str is invalid.
    """
    return _match(value) is not None


def parse(value: Any, as_array: bool = False) -> Union[ParsedHSL, HSLTuple, None]:
    """
    Parse an HSL / HSLA color string into normalized components.

    Args:
        value: Color string, e.g. "hsl(120deg 50% 50% / 0.5)" or "hsla(120, 50%, 50%, 0.5)"
        as_array: Return an (h, s, l, a) tuple instead of a ParsedHSL

    Returns:
        ParsedHSL or (h, s, l, a) with h in [0, 360), s and l in [0, 100], a in [0, 1],
        or None if the value is not a valid HSL color string
    """
    raw = _match(value)
    if raw is None:
        return None
    color = normalize(raw)
    return color.as_tuple() if as_array else color


def np_is_valid(values: Any) -> NDArray:
    """
    Vectorized: test every element of a sequence or array of strings.

    Returns:
        bool array with the shape of the input
    """
    values = np.asarray(values, dtype=object)
    result = np.zeros(values.shape, dtype=bool)
    for index, value in np.ndenumerate(values):
        result[index] = is_valid(value)
    return result


def np_parse(values: Any) -> NDArray:
    """
    Vectorized: parse every element of a sequence or array of strings.

    Args:
        values: array-like of color strings

    Returns:
        float64 array of shape (..., 4): (h, s, l, a) per element,
        all NaN where the element is not a valid HSL color string
    """
    values = np.asarray(values, dtype=object)
    result = np.full(values.shape + (4,), np.nan, dtype=np.float64)
    for index, value in np.ndenumerate(values):
        color = parse(value, as_array=True)
        if color is not None:
            result[index] = color
    return result
