from .grammar import match_hsl, MODERN_HSL_REGEX, LEGACY_HSL_REGEX
from .numbers import clamp_range, hue_to_degrees, normalize_hue, alpha_form, resolve_alpha, normalize
from .parser import is_valid, parse, np_is_valid, np_parse
from .serialize import format_hsl

__all__ = [
    # Grammar
    'match_hsl',
    'MODERN_HSL_REGEX',
    'LEGACY_HSL_REGEX',

    # Normalization
    'clamp_range',
    'hue_to_degrees',
    'normalize_hue',
    'alpha_form',
    'resolve_alpha',
    'normalize',

    # Parsing
    'is_valid',
    'parse',
    'np_is_valid',
    'np_parse',

    # Serialization
    'format_hsl',
]
