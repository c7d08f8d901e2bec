import pytest

from hslparse import format_hsl, parse, is_valid, ParsedHSL
from tests.samples import samples_valid_hsl


def test_format_modern():
    assert format_hsl(ParsedHSL(120.0, 50.0, 50.0, 1.0)) == "hsl(120 50% 50%)"
    assert format_hsl((120.0, 50.0, 50.0, 0.5)) == "hsl(120 50% 50% / 0.5)"
    assert format_hsl([210.5, 0.25, 100, 0]) == "hsl(210.5 0.25% 100% / 0)"


def test_format_legacy():
    assert format_hsl(ParsedHSL(120.0, 50.0, 50.0, 1.0), legacy=True) == "hsl(120, 50%, 50%)"
    assert format_hsl((120.0, 50.0, 50.0, 0.5), legacy=True) == "hsla(120, 50%, 50%, 0.5)"


def test_format_precision():
    color = parse("hsl(3.14159265rad 33.333333% 50% / 0.123456)")
    assert format_hsl(color, precision=2) == "hsl(180 33.33% 50% / 0.12)"
    assert format_hsl(color, precision=0) == "hsl(180 33% 50% / 0)"


def test_format_never_uses_exponents():
    text = format_hsl((1e-7, 1e-10, 99.99999999, 1e-5))
    assert "e" not in text
    assert is_valid(text)


def test_round_trip():
    for source in samples_valid_hsl:
        color = parse(source)
        for legacy in (False, True):
            again = parse(format_hsl(color, legacy=legacy))
            assert again is not None, source
            assert all(abs(x - y) < 1e-9 for x, y in zip(again.as_tuple(), color.as_tuple())), source


def test_format_rejects_bad_colors():
    with pytest.raises(ValueError):
        format_hsl((120.0, 50.0, 50.0))
    with pytest.raises(ValueError):
        format_hsl(("red", 50.0, 50.0, 1.0))
    with pytest.raises(ValueError):
        format_hsl((float("nan"), 50.0, 50.0, 1.0))
    with pytest.raises(ValueError):
        format_hsl(None)
    with pytest.raises(ValueError):
        format_hsl((120.0, 50.0, 50.0, 1.0), precision=-1)


def test_negative_zero_formats_without_sign():
    color = parse("hsl(-0 -0% -0.0% / -0)")
    assert color == ParsedHSL(0.0, 0.0, 0.0, 0.0)
    assert format_hsl(color) == "hsl(0 0% 0% / 0)"
    assert format_hsl(parse("hsla(-0, -0%, -0%, -0%)"), legacy=True) == "hsla(0, 0%, 0%, 0)"
