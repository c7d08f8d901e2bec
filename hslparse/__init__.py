"""
hslparse - CSS HSL / HSLA color string parsing
==============================================

Parse and validate the HSL color notation of the CSS Color Module, both the
legacy comma separated syntax and the modern space separated one.

Supported syntax
----------------
    hsl(H, S%, L%)            hsla(H, S%, L%, A)
    hsl(H S% L%)              hsl(H S% L% / A)

    H: <number> with an optional deg, grad, rad or turn unit
    A: <number> or <percentage>

Normalized output
-----------------
    h: degrees, wrapped into [0, 360)
    s: percentage, clamped to [0, 100]
    l: percentage, clamped to [0, 100]
    a: clamped to [0, 1], 1 when omitted

Examples
--------
>>> from hslparse import parse, is_valid
>>> parse("hsl(0.5turn 50% 50% / 50%)")
ParsedHSL(h=180.0, s=50.0, l=50.0, a=0.5)
>>> parse("hsla(-10, 150%, 20%)", as_array=True)
(350.0, 100.0, 20.0, 1.0)
>>> is_valid("hsl(120, 50% 50%)")
False
>>>
>>> # Vectorized parsing
>>> from hslparse import np_parse
>>> np_parse(["hsl(120 50% 50%)", "not a color"])
array([[120.,  50.,  50.,   1.],
       [ nan,  nan,  nan,  nan]])
"""

from .parsing import (
    is_valid,
    parse,
    np_is_valid,
    np_parse,
    format_hsl,
    match_hsl,
)
from .types import AngleUnit, AlphaForm, ParsedHSL, RawHSL

__version__ = "1.0.0"

__all__ = [
    # parsing
    "is_valid",
    "parse",
    "np_is_valid",
    "np_parse",
    "match_hsl",
    # serialization
    "format_hsl",
    # types
    "ParsedHSL",
    "RawHSL",
    "AngleUnit",
    "AlphaForm",
    "__version__",
]
