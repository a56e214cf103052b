import numpy as np
import pytest
from PIL import Image

from major_colour.core_types import MajorColour
from major_colour.swatch import save_swatch_png, swatch_array


def test_swatch_array_layout():
    arr = swatch_array([MajorColour.RED, MajorColour.BLUE], cell=4)
    assert arr.shape == (4, 8, 4)
    assert arr.dtype == np.uint8
    assert arr[0, 0].tolist() == [255, 0, 0, 255]
    assert arr[3, 7].tolist() == [0, 0, 255, 255]


def test_swatch_array_rejects_empty():
    with pytest.raises(ValueError):
        swatch_array([])


def test_swatch_array_rejects_bad_cell():
    with pytest.raises(ValueError):
        swatch_array([MajorColour.RED], cell=0)


def test_save_swatch_png(tmp_path):
    out = save_swatch_png(tmp_path / "strip.jpg", [MajorColour.PINK], cell=2)
    assert out.suffix == ".png"
    assert out.exists()
    with Image.open(out) as im:
        assert im.mode == "RGBA"
        assert im.size == (2, 2)
        assert im.getpixel((1, 1)) == (255, 177, 190, 255)
