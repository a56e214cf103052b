import numpy as np
import pytest

from major_colour.classify import (
    nearest_color,
    palette_distances,
    rgba_from_color,
    to_major,
)
from major_colour.constants import PALETTE
from major_colour.core_types import (
    RGB,
    MajorColour,
    UnknownMajorColourError,
    euclidean_distance,
)
from major_colour.palette_data import get_palette


@pytest.mark.parametrize("hex_value,_rgb,label", PALETTE)
def test_canonical_hex_classifies_as_own_label(hex_value, _rgb, label):
    assert nearest_color(hex_value) is MajorColour(label)


def test_nearest_color_is_deterministic():
    assert nearest_color(0x3A7BD5) is nearest_color(0x3A7BD5)


def test_boundaries():
    assert nearest_color(0x000000) is MajorColour.BLACK
    assert nearest_color(0xFFFFFF) is MajorColour.WHITE
    assert nearest_color(0x010101) is MajorColour.BLACK


def test_near_grey():
    assert nearest_color(0x7F7F7F) is MajorColour.GREY


def test_tie_prefers_earlier_grey_over_black():
    dists = dict(palette_distances(0x404040))
    assert dists[MajorColour.GREY] == dists[MajorColour.BLACK]
    assert nearest_color(0x404040) is MajorColour.GREY


def test_tie_prefers_earlier_blue_over_dark_blue():
    dists = dict(palette_distances(0x0000C5))
    assert dists[MajorColour.BLUE] == pytest.approx(58.0)
    assert dists[MajorColour.DARK_BLUE] == pytest.approx(58.0)
    assert nearest_color(0x0000C5) is MajorColour.BLUE


def test_nearest_by_distance_not_exact_match():
    assert nearest_color(0xFE0101) is MajorColour.RED
    assert nearest_color(0x000090) is MajorColour.DARK_BLUE


@pytest.mark.parametrize("bad", [-1, 0x1000000])
def test_nearest_color_out_of_range(bad):
    with pytest.raises(ValueError):
        nearest_color(bad)


@pytest.mark.parametrize(
    "value,expected",
    [
        (np.uint32(0x808080), MajorColour.GREY),
        (np.int64(0x808080), MajorColour.GREY),
        (np.uint8(0x80), MajorColour.DARK_BLUE),
    ],
)
def test_nearest_color_accepts_numpy_integers(value, expected):
    assert nearest_color(value) is expected


def test_palette_distances_accepts_numpy_integer():
    assert palette_distances(np.uint32(0x808080))[0] == (MajorColour.GREY, 0.0)


@pytest.mark.parametrize(
    "bad", ["ff0000", 1.5, True, np.bool_(True), np.float64(1.0)]
)
def test_nearest_color_rejects_non_int(bad):
    with pytest.raises(TypeError):
        nearest_color(bad)


@pytest.mark.parametrize("colour", list(MajorColour))
def test_rgba_flag_has_no_effect(colour):
    opaque = rgba_from_color(colour, True)
    assert opaque == rgba_from_color(colour, False)
    assert opaque == rgba_from_color(colour)
    assert opaque[3] == 255


def test_rgba_channels_come_from_palette():
    assert rgba_from_color(MajorColour.GREY) == (128, 128, 128, 255)
    assert rgba_from_color(MajorColour.YELLOW) == (255, 255, 0, 255)
    assert rgba_from_color(MajorColour.LIGHT_BLUE) == (19, 170, 253, 255)


def test_rgba_rejects_plain_label():
    with pytest.raises(TypeError):
        rgba_from_color("Red")


def test_to_major_round_trip():
    for item in get_palette():
        assert to_major(item.rgb) is item.colour


def test_to_major_unknown_hex():
    with pytest.raises(UnknownMajorColourError) as excinfo:
        to_major(RGB.from_hex(0x123456))
    assert excinfo.value.hex_value == 0x123456
    assert "#123456" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_palette_distances_match_scalar_metric():
    rows = palette_distances(0x3A7BD5)
    assert [c for c, _d in rows] == list(MajorColour)
    src = RGB.from_hex(0x3A7BD5)
    for (colour, dist), item in zip(rows, get_palette()):
        assert dist == pytest.approx(euclidean_distance(src, item.rgb))
        assert dist >= 0.0
