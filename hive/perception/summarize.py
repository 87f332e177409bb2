#!/usr/bin/env python3
from __future__ import annotations

from typing import Iterable, List, Tuple

import cv2
import numpy as np

from hive.domain.hive_region import HiveRegion, format_location, region_name


def enclosing_circle(contour: np.ndarray) -> Tuple[Tuple[float, float], float]:
    (x, y), r = cv2.minEnclosingCircle(contour)
    return (float(x), float(y)), float(r)


def enclosing_center(contour: np.ndarray) -> Tuple[int, int]:
    (x, y), _ = enclosing_circle(contour)
    return int(round(x)), int(round(y))


def bee_count(contour: np.ndarray) -> int:
    # point count of the approximated boundary, kept as-is from the field tool
    return int(len(contour))


def summarize_regions(contours: Iterable[np.ndarray], placement_date: str) -> List[HiveRegion]:
    return [
        HiveRegion(
            name=region_name(i),
            location=format_location(enclosing_center(c)),
            bee_count=bee_count(c),
            placement_date=placement_date,
        )
        for i, c in enumerate(contours)
    ]
