import pytest

from solong.colors import PixelFormat, color_names, parse_color

RGB565 = (0xF800, 0x07E0, 0x001F)


def test_named_color_lookup():
    assert parse_color("red") == 0xFF0000
    assert parse_color("navy") == 0x80


def test_lookup_ignores_case():
    assert parse_color("ReD") == parse_color("red")
    assert parse_color("GHOSTWHITE") == 0xF8F8FF


def test_hash_form_is_hexadecimal():
    assert parse_color("#FF0000") == 0xFF0000
    assert parse_color("#00ff00") == 0xFF00


def test_hash_form_stops_at_non_hex():
    assert parse_color("#ff00zz") == 0xFF00
    assert parse_color("#") == 0


def test_qualifier_joined_with_space():
    assert parse_color("navy", "blue") == 0x80
    assert parse_color("ghost", "white") == parse_color("ghostwhite")


def test_duplicate_name_first_entry_wins():
    assert parse_color("dark", "slate") == 0x2F4F4F
    assert parse_color("light", "goldenrod") == 0xFAFAD2


def test_none_is_transparent_marker():
    assert parse_color("None") == -1


def test_unknown_name_is_zero():
    assert parse_color("no-such-colour") == 0
    assert parse_color("red", "nonsense") == 0


def test_color_names_unique_and_resolvable():
    names = color_names()
    assert len(names) == len(set(names))
    assert names[0] == "snow"
    assert names[-1] == "none"
    for name in names:
        assert parse_color(name.upper()) == parse_color(name)


def test_deep_display_passes_colour_through():
    fmt = PixelFormat.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)
    for color in (0x0, 0x123456, 0xFFFFFF):
        assert fmt.convert(color) == color


def test_from_masks_layout_roundtrip():
    fmt = PixelFormat.from_masks(*RGB565, 16)
    rebuilt = tuple(
        ((1 << bits) - 1) << shift
        for shift, bits in (
            (fmt.red_shift, fmt.red_bits),
            (fmt.green_shift, fmt.green_bits),
            (fmt.blue_shift, fmt.blue_bits),
        )
    )
    assert rebuilt == RGB565


def test_shallow_display_primaries_fill_their_masks():
    fmt = PixelFormat.from_masks(*RGB565, 16)
    red_mask, green_mask, blue_mask = RGB565
    assert fmt.convert(0xFF0000) == red_mask
    assert fmt.convert(0x00FF00) == green_mask
    assert fmt.convert(0x0000FF) == blue_mask
    assert fmt.convert(0xFFFFFF) == red_mask | green_mask | blue_mask
    assert fmt.convert(0) == 0


def test_shallow_display_channels_are_independent():
    fmt = PixelFormat.from_masks(*RGB565, 16)
    color = 0x336699
    parts = fmt.convert(color & 0xFF0000) + fmt.convert(color & 0xFF00) + fmt.convert(color & 0xFF)
    assert fmt.convert(color) == parts


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, -1)])
def test_empty_mask_rejected(masks):
    with pytest.raises(ValueError):
        PixelFormat.from_masks(*masks, 16)