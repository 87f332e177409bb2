#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Pt = Tuple[int, int]

DEFAULT_PLACEMENT_DATE = "2024-04-29"


@dataclass(frozen=True)
class HiveRegion:
    name: str
    location: str  # "(x, y)" centre of the minimal enclosing circle, pixels
    bee_count: int  # contour point count, not a population estimate
    placement_date: str  # ISO date
    id: Optional[int] = None


def region_name(index: int) -> str:
    """Sequential label for the index-th region of one image (0-based index)."""
    return f"Region {index + 1}"


def format_location(center: Pt) -> str:
    return f"({center[0]}, {center[1]})"


def parse_location(text: str) -> Pt:
    x, y = text.strip("()").split(",")
    return int(x), int(y)
