#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import cv2
import numpy as np

from hive.domain.errors import ColorConversionError, ImageLoadError

HSV = Tuple[int, int, int]


@dataclass(frozen=True)
class ColorBand:
    lo: HSV
    hi: HSV  # inclusive; hue on OpenCV's 0-179 scale


YELLOW = ColorBand(lo=(20, 100, 100), hi=(30, 255, 255))  # bees
BLACK = ColorBand(lo=(0, 0, 0), hi=(180, 255, 30))  # queen / marker


@dataclass
class Extraction:
    image: np.ndarray
    yellow: List[np.ndarray] = field(default_factory=list)
    black: List[np.ndarray] = field(default_factory=list)

    @property
    def found(self) -> bool:
        # both bands must be present for a hive frame to count as a detection
        return bool(self.yellow) and bool(self.black)


def load_image(path) -> np.ndarray:
    img = cv2.imread(str(path))
    if img is None or img.size == 0:
        raise ImageLoadError(f"cannot load image: {path}")
    return img


def to_hsv(bgr_img: np.ndarray) -> np.ndarray:
    try:
        hsv = cv2.cvtColor(bgr_img, cv2.COLOR_BGR2HSV)
    except cv2.error as e:
        raise ColorConversionError(f"BGR->HSV conversion failed: {e}") from e
    if hsv is None or hsv.size == 0:
        raise ColorConversionError("BGR->HSV conversion produced an empty image")
    return hsv


def band_mask(hsv: np.ndarray, band: ColorBand) -> np.ndarray:
    return cv2.inRange(hsv, np.array(band.lo, dtype=np.uint8), np.array(band.hi, dtype=np.uint8))


def find_external_contours(mask: np.ndarray) -> List[np.ndarray]:
    """Outermost boundaries only, straight runs compressed to their end points."""
    cnts, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    return list(cnts)


def extract_regions(image_path, yellow: ColorBand = YELLOW, black: ColorBand = BLACK) -> Extraction:
    """Loads an image and returns the yellow and black external contours."""
    img = load_image(image_path)
    hsv = to_hsv(img)
    return Extraction(
        image=img,
        yellow=find_external_contours(band_mask(hsv, yellow)),
        black=find_external_contours(band_mask(hsv, black)),
    )
