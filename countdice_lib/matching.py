"""
Matching Module - Assigning Pips to Dice
========================================

Point-in-polygon tests that decide which die each pip belongs to.

Pip contours are expected to lie entirely inside or entirely outside every die
contour; they never cross a die border. Under that precondition testing a single
boundary point of the pip is the same as testing the whole pip. A pip cut by the
image border, or one touching a die edge, may be miscounted. Use
full_polygon_check=True to require every point of the pip to be inside.

When two candidate dice overlap, a pip inside both is counted for each of them.
Which die should own it is left undefined.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class DieCount:
    """A die contour together with the number of pips found inside it."""
    contour: np.ndarray
    dot_count: int
    bounding_rect: Tuple[int, int, int, int]  # x, y, w, h


def representative_point(contour: np.ndarray) -> Tuple[int, int]:
    """Return the first boundary point of a contour as (x, y)."""
    x, y = contour.reshape(-1, 2)[0]
    return int(x), int(y)


def is_point_strictly_inside(polygon: np.ndarray, point: Tuple[int, int]) -> bool:
    """
    Check whether a point lies strictly inside a polygon.

    Points on the polygon edge are not inside.
    """
    pt = (float(point[0]), float(point[1]))
    return cv2.pointPolygonTest(polygon, pt, False) > 0


def is_contour_strictly_inside(polygon: np.ndarray, contour: np.ndarray) -> bool:
    """Check whether every point of contour lies strictly inside polygon."""
    return all(
        is_point_strictly_inside(polygon, (x, y))
        for x, y in contour.reshape(-1, 2)
    )


def count_dots_per_die(
    die_contours: List[np.ndarray],
    dot_contours: List[np.ndarray],
    full_polygon_check: bool = False,
) -> Tuple[List[DieCount], int]:
    """
    Count the pips inside each die.

    Args:
        die_contours: Contours classified as dice
        dot_contours: Contours classified as pips
        full_polygon_check: Require all pip points inside instead of only the first one

    Returns:
        Tuple of per-die counts (same order as die_contours) and the total pip count
    """
    die_counts = []
    total_dots = 0

    for die_contour in die_contours:
        dot_count = 0
        for dot_contour in dot_contours:
            if full_polygon_check:
                inside = is_contour_strictly_inside(die_contour, dot_contour)
            else:
                inside = is_point_strictly_inside(
                    die_contour, representative_point(dot_contour)
                )
            if inside:
                dot_count += 1

        x, y, w, h = cv2.boundingRect(die_contour)
        die_counts.append(DieCount(die_contour, dot_count, (x, y, w, h)))
        total_dots += dot_count
        logger.debug("Die at (%d, %d, %d, %d): %d dots", x, y, w, h, dot_count)

    return die_counts, total_dots
