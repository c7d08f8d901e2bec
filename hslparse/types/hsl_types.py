from __future__ import annotations
import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import NamedTuple, Optional, Tuple

HUE_360 = 360.0
PERCENT_MAX = 100.0
ALPHA_MAX = 1.0

# Shortest string the grammar accepts: hsl(0 0%0%)
MIN_HSL_LENGTH = 11

HSLTuple = Tuple[float, float, float, float]


class AngleUnit(str, Enum):
    NONE = ""
    DEG = "deg"
    GRAD = "grad"
    RAD = "rad"
    TURN = "turn"

    @property
    def factor(self) -> float:
        """Multiplier that turns a hue in this unit into degrees."""
        return angle_factors[self]


angle_factors = {
    AngleUnit.NONE: 1.0,
    AngleUnit.DEG: 1.0,
    AngleUnit.GRAD: 0.9,
    AngleUnit.RAD: 180.0 / math.pi,  # math.pi == 3.141592653589793
    AngleUnit.TURN: HUE_360,
}


class AlphaForm(Enum):
    ABSENT = "absent"
    NUMBER = "number"
    PERCENTAGE = "percentage"


class RawHSL(NamedTuple):
    """Unnormalized tokens pulled out of a matched HSL string."""
    hue: str
    unit: AngleUnit
    saturation: str
    lightness: str
    alpha: Optional[str]
    legacy: bool


@dataclass(frozen=True)
class ParsedHSL:
    """
    A normalized HSL(A) color.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]
        a: Alpha in [0, 1]
    """
    h: float
    s: float
    l: float
    a: float = ALPHA_MAX

    def as_tuple(self) -> HSLTuple:
        return (self.h, self.s, self.l, self.a)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)
