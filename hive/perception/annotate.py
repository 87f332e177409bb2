#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

import cv2

from hive.domain.errors import DisplayError

GREEN = (0, 255, 0)
DISPLAY_MODES = ("none", "file", "window")
WINDOW_TITLE = "Hive detection"


def draw_boxes(bgr_img, contours, color=GREEN, thickness=2):
    out = bgr_img.copy()
    for c in contours:
        x, y, w, h = cv2.boundingRect(c)
        cv2.rectangle(out, (x, y), (x + w, y + h), color, thickness)
    return out


def annotate(bgr_img, yellow, black):
    return draw_boxes(draw_boxes(bgr_img, black), yellow)


def present(bgr_img, yellow, black, mode="none", out_path=None):
    """
    Draws boxes around both contour sets and shows them.
    mode: "none" (headless, nothing drawn), "file" (write PNG to out_path),
    "window" (blocks until a key press; needs a GUI build of OpenCV).
    Returns the path written in "file" mode, else None.
    Raises DisplayError when the image cannot be written or shown.
    """
    if mode not in DISPLAY_MODES:
        raise ValueError(f"unknown display mode: {mode!r}")
    if mode == "none":
        return None
    ann = annotate(bgr_img, yellow, black)
    if mode == "file":
        if out_path is None:
            raise ValueError("display mode 'file' needs an output path")
        out_path = Path(out_path)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            ok = cv2.imwrite(str(out_path), ann)
        except (OSError, cv2.error) as e:
            raise DisplayError(f"cannot write annotated image {out_path}: {e}") from e
        if not ok:
            raise DisplayError(f"cannot write annotated image {out_path}")
        return out_path
    try:
        cv2.imshow(WINDOW_TITLE, ann)
        cv2.waitKey(0)
        cv2.destroyAllWindows()
    except cv2.error as e:
        raise DisplayError(f"cannot open a display window (headless OpenCV build?): {e}") from e
    return None
