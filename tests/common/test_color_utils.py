from __future__ import annotations

import pytest

from util.color import normalize_color, parse_hex_color_str, to_u8_rgba


def _approx_tuple(t):
    return tuple(round(v, 6) for v in t)


def test_parse_hex_color_variants() -> None:
    expected = (round(0x87 / 255.0, 6), round(0xCE / 255.0, 6), round(0xEB / 255.0, 6), 1.0)
    assert _approx_tuple(parse_hex_color_str("#87CEEB")) == expected
    assert _approx_tuple(parse_hex_color_str("87ceeb")) == expected
    assert parse_hex_color_str("0x000000CC")[3] == pytest.approx(0xCC / 255.0)


@pytest.mark.parametrize("bad", ["#123", "not-a-color", "#GGHHII"])
def test_parse_hex_color_invalid(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_color_str(bad)


def test_normalize_color_unit_and_byte_ranges() -> None:
    assert _approx_tuple(normalize_color((0.1, 0.2, 0.3))) == (0.1, 0.2, 0.3, 1.0)
    assert _approx_tuple(normalize_color([34, 139, 34])) == (
        round(34 / 255.0, 6),
        round(139 / 255.0, 6),
        round(34 / 255.0, 6),
        1.0,
    )


def test_normalize_color_rejects_unsupported() -> None:
    with pytest.raises(ValueError):
        normalize_color(42)
    with pytest.raises(ValueError):
        normalize_color((1.0, 0.0))
    with pytest.raises(ValueError):
        normalize_color(("a", "b", "c"))


def test_to_u8_rgba() -> None:
    assert to_u8_rgba("#FFFFFF") == (255, 255, 255, 255)
    assert to_u8_rgba((0.0, 1.0, 0.0, 0.0)) == (0, 255, 0, 0)
