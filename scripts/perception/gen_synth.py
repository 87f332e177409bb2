#!/usr/bin/env python3
from __future__ import annotations

import argparse
import csv
import random
from pathlib import Path

import cv2
import numpy as np

W, H = 320, 240
COMB = (150, 170, 190)  # pale wax background, outside both bands
BEE_YELLOW = (0, 200, 255)  # BGR, hue ~24 on OpenCV's scale
MARKER_BLACK = (0, 0, 0)


def draw_hive_image(bees, markers=(), size=(W, H), background=COMB):
    """
    Renders a flat synthetic hive frame.
    bees / markers: iterables of (x, y, w, h) filled rectangles.
    """
    w, h = size
    img = np.full((h, w, 3), background, dtype=np.uint8)
    for x, y, bw, bh in markers:
        cv2.rectangle(img, (x, y), (x + bw - 1, y + bh - 1), MARKER_BLACK, -1)
    for x, y, bw, bh in bees:
        cv2.rectangle(img, (x, y), (x + bw - 1, y + bh - 1), BEE_YELLOW, -1)
    return img


def _random_boxes(k, taken):
    boxes = []
    while len(boxes) < k:
        bw, bh = random.randint(15, 35), random.randint(15, 35)
        x, y = random.randint(5, W - bw - 5), random.randint(5, H - bh - 5)
        # keep a 3px gap so blobs stay disjoint
        if any(x < ox + ow + 3 and ox < x + bw + 3 and y < oy + oh + 3 and oy < y + bh + 3
               for ox, oy, ow, oh in taken + boxes):
            continue
        boxes.append((x, y, bw, bh))
    return boxes


def main():
    ap = argparse.ArgumentParser(description="Write synthetic hive frames and ground truth.")
    ap.add_argument("--out", default="artifacts/hive_in")
    ap.add_argument("-n", type=int, default=8)
    ap.add_argument("--seed", type=int, default=7)
    args = ap.parse_args()

    random.seed(args.seed)
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    rows = []
    for i in range(args.n):
        markers = _random_boxes(1, [])
        bees = _random_boxes(random.randint(1, 5), markers)
        fn = out_dir / f"hive_{i:03d}.png"
        cv2.imwrite(str(fn), draw_hive_image(bees, markers))
        rows.extend(
            {"filename": fn.name, "band": "yellow", "x": x, "y": y, "w": bw, "h": bh}
            for x, y, bw, bh in bees
        )
        rows.extend(
            {"filename": fn.name, "band": "black", "x": x, "y": y, "w": bw, "h": bh}
            for x, y, bw, bh in markers
        )
    gt_csv = out_dir / "gt_regions.csv"
    with open(gt_csv, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["filename", "band", "x", "y", "w", "h"])
        w.writeheader()
        w.writerows(rows)
    print(f"Wrote {args.n} images to {out_dir} and GT to {gt_csv}")


if __name__ == "__main__":
    main()
