import cv2
import numpy as np
import pytest

from hive.domain.errors import ColorConversionError, ImageLoadError
from hive.perception.hive_regions import (
    BLACK,
    YELLOW,
    ColorBand,
    band_mask,
    extract_regions,
    find_external_contours,
    to_hsv,
)
from hive.perception.summarize import enclosing_center
from scripts.perception.gen_synth import draw_hive_image


def _write(tmp_path, img, name="frame.png"):
    p = tmp_path / name
    cv2.imwrite(str(p), img)
    return p


def test_single_yellow_blob_centre(tmp_path):
    # 40x30 blob at (100, 80): pixel centroid is (119.5, 94.5)
    p = _write(tmp_path, draw_hive_image([(100, 80, 40, 30)], [(10, 10, 20, 20)]))
    ext = extract_regions(p)
    assert len(ext.yellow) == 1
    assert len(ext.black) == 1
    cx, cy = enclosing_center(ext.yellow[0])
    assert abs(cx - 119.5) <= 1.0
    assert abs(cy - 94.5) <= 1.0


def test_round_blob_centre(tmp_path):
    img = draw_hive_image([])
    cv2.circle(img, (200, 120), 25, (0, 200, 255), -1)
    ext = extract_regions(_write(tmp_path, img))
    assert len(ext.yellow) == 1
    cx, cy = enclosing_center(ext.yellow[0])
    assert abs(cx - 200) <= 2 and abs(cy - 120) <= 2


def test_all_white_has_no_regions(tmp_path):
    img = np.full((120, 160, 3), 255, dtype=np.uint8)
    ext = extract_regions(_write(tmp_path, img))
    assert ext.yellow == [] and ext.black == []
    assert not ext.found


def test_all_black_has_no_yellow(tmp_path):
    img = np.zeros((120, 160, 3), dtype=np.uint8)
    ext = extract_regions(_write(tmp_path, img))
    assert ext.yellow == []
    assert len(ext.black) == 1
    assert not ext.found


def test_nested_contours_are_dropped():
    mask = np.zeros((100, 100), dtype=np.uint8)
    cv2.rectangle(mask, (10, 10), (89, 89), 255, -1)
    cv2.rectangle(mask, (30, 30), (69, 69), 0, -1)  # hole
    cv2.rectangle(mask, (45, 45), (54, 54), 255, -1)  # island inside the hole
    assert len(find_external_contours(mask)) == 1


def test_simple_approximation_compresses_rectangle():
    mask = np.zeros((60, 60), dtype=np.uint8)
    cv2.rectangle(mask, (10, 10), (49, 29), 255, -1)
    (c,) = find_external_contours(mask)
    assert len(c) == 4


def test_band_bounds_are_inclusive():
    hsv = np.array([[[20, 100, 100], [30, 255, 255], [19, 255, 255], [31, 255, 255]]], dtype=np.uint8)
    assert band_mask(hsv, YELLOW).ravel().tolist() == [255, 255, 0, 0]
    dark = np.array([[[90, 200, 30], [90, 200, 31]]], dtype=np.uint8)
    assert band_mask(dark, BLACK).ravel().tolist() == [255, 0]


def test_custom_band_is_used(tmp_path):
    img = draw_hive_image([(50, 50, 20, 20)], [(5, 5, 10, 10)])
    p = _write(tmp_path, img)
    blue_only = ColorBand(lo=(100, 100, 100), hi=(130, 255, 255))
    assert extract_regions(p, yellow=blue_only).yellow == []


def test_missing_image_raises(tmp_path):
    with pytest.raises(ImageLoadError):
        extract_regions(tmp_path / "nope.png")


def test_undecodable_image_raises(tmp_path):
    p = tmp_path / "junk.png"
    p.write_bytes(b"not a png")
    with pytest.raises(ImageLoadError):
        extract_regions(p)


def test_hsv_conversion_rejects_bad_input():
    with pytest.raises(ColorConversionError):
        to_hsv(np.zeros((4, 4, 2), dtype=np.uint8))
