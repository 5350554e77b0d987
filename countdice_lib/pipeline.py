"""
Pipeline Module - High-Level Orchestration
==========================================

Runs every stage of the dice counter on one image.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import cv2
import numpy as np

from .config import get_section
from .morphology import binarize
from .contours import find_all_contours, filter_contours_by_area, contour_areas
from .matching import DieCount, count_dots_per_die
from .display import show_image, annotate_dice_counts

logger = logging.getLogger(__name__)


@dataclass
class DiceCountResult:
    """Container for pipeline processing results."""
    # Input
    original_image: np.ndarray

    # Intermediate images
    gray: np.ndarray
    binary: np.ndarray

    # Contours
    all_contours: List[np.ndarray]
    die_contours: List[np.ndarray]
    dot_contours: List[np.ndarray]

    # Counts
    die_counts: List[DieCount]
    total_dots: int

    # Output
    annotated_image: np.ndarray

    @property
    def dice_found(self) -> int:
        return len(self.die_counts)


def count_dice(
    img,
    config=None,
    debug=False,
    full_polygon_check: Optional[bool] = None,
):
    """
    Count the pips on every die in a photo and annotate the photo.

    This function performs:
    1. Grayscale conversion and fixed-threshold binarization
    2. Contour tracing (all contours, no hierarchy)
    3. Area classification into dice and pips
    4. Pip-to-die matching by point-in-polygon containment
    5. Annotation of counts, total and contours

    Parameters
    ----------
    img : np.ndarray
        Input BGR image. Annotated in place; a copy of the untouched
        input is kept in the result.
    config : dict or None
        Configuration from load_config(). None uses the defaults.
    debug : bool
        If True, display intermediate images with matplotlib.
    full_polygon_check : bool or None
        Overrides config["matching"]["full_polygon_check"] when not None.

    Returns
    -------
    DiceCountResult
        Container with counts, contours and intermediate images.

    Raises
    ------
    ValueError
        If the input image is None, empty, or not 3-channel.
    """
    binarize_cfg = get_section(config, "binarize")
    dice_cfg = get_section(config, "dice")
    dots_cfg = get_section(config, "dots")
    matching_cfg = get_section(config, "matching")
    if full_polygon_check is None:
        full_polygon_check = bool(matching_cfg["full_polygon_check"])

    # 1) Binarize
    gray, binary = binarize(
        img,
        threshold_value=binarize_cfg["thresh_value"],
        max_value=binarize_cfg["max_value"],
    )
    original = img.copy()
    if debug:
        show_image(gray, "Grayscale")
        show_image(binary, "Binary (threshold %s)" % binarize_cfg["thresh_value"])

    # 2) Trace contours
    all_contours = find_all_contours(binary)
    logger.debug("Contour areas: %s", sorted(contour_areas(all_contours), reverse=True))

    # 3) Classify by area
    die_contours = filter_contours_by_area(
        all_contours, dice_cfg["min_area"], dice_cfg["max_area"]
    )
    dot_contours = filter_contours_by_area(
        all_contours, dots_cfg["min_area"], dots_cfg["max_area"]
    )
    logger.info(
        "Contours: %d total, %d dice, %d dots",
        len(all_contours), len(die_contours), len(dot_contours),
    )

    if debug:
        contour_img = original.copy()
        if all_contours:
            cv2.drawContours(contour_img, all_contours, -1, (0, 0, 255), 1)
        show_image(contour_img, "All contours")

    # 4) Match dots to dice
    die_counts, total_dots = count_dots_per_die(
        die_contours, dot_contours, full_polygon_check=full_polygon_check
    )
    logger.info("Total dots: %d", total_dots)

    # 5) Annotate
    annotated = annotate_dice_counts(
        img,
        die_counts,
        total_dots,
        die_contours,
        dot_contours,
        annotation=get_section(config, "annotation"),
    )
    if debug:
        show_image(annotated, "Labeled image")

    return DiceCountResult(
        original_image=original,
        gray=gray,
        binary=binary,
        all_contours=all_contours,
        die_contours=die_contours,
        dot_contours=dot_contours,
        die_counts=die_counts,
        total_dots=total_dots,
        annotated_image=annotated,
    )
