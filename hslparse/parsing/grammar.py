"""
HSL / HSLA grammar recognizer.

Legacy syntax (comma separated values):
    hsl(hue, saturation, lightness [, alpha])
    hsla(hue, saturation, lightness [, alpha])

Modern syntax (space separated values):
    hsl(hue saturation lightness [/ alpha])
    hsla(hue saturation lightness [/ alpha])

    hue:        <number> | <number>(deg|grad|rad|turn)
    saturation: <number>%
    lightness:  <number>%
    alpha:      <number> | <number>%

The two syntaxes are separate patterns; a string has to commit to one of them.
Only the function name is case-insensitive.
"""

import re
from typing import Optional

from ..types.hsl_types import AngleUnit, RawHSL

NUMBER = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
HUE = rf"(?P<hue>{NUMBER})(?P<unit>deg|grad|rad|turn)?"
ALPHA = rf"(?P<alpha>{NUMBER}%?)"
OPEN = r"(?i:hsla?)\(\s*"
CLOSE = r"\s*\)"

MODERN_HSL_REGEX = re.compile(
    OPEN + HUE
    + rf"\s+(?P<saturation>{NUMBER})%\s*(?P<lightness>{NUMBER})%"
    + rf"(?:\s*/\s*{ALPHA})?"
    + CLOSE,
    re.ASCII,
)

LEGACY_HSL_REGEX = re.compile(
    OPEN + HUE
    + rf"\s*,\s*(?P<saturation>{NUMBER})%\s*,\s*(?P<lightness>{NUMBER})%"
    + rf"(?:\s*,\s*{ALPHA})?"
    + CLOSE,
    re.ASCII,
)


def _to_raw(match: re.Match, legacy: bool) -> RawHSL:
    return RawHSL(
        hue=match["hue"],
        unit=AngleUnit(match["unit"] or ""),
        saturation=match["saturation"],
        lightness=match["lightness"],
        alpha=match["alpha"],
        legacy=legacy,
    )


def match_hsl(text: str) -> Optional[RawHSL]:
    """
    Match a whole string against the HSL grammar.

    Args:
        text: Candidate string, already stripped of surrounding whitespace

    Returns:
        RawHSL with the unnormalized tokens, or None if the string does not match
    """
    match = MODERN_HSL_REGEX.fullmatch(text)
    if match is not None:
        return _to_raw(match, legacy=False)
    match = LEGACY_HSL_REGEX.fullmatch(text)
    if match is not None:
        return _to_raw(match, legacy=True)
    return None
