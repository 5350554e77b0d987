"""
Contours Module - Contour Detection and Area Classification
===========================================================

Functions for tracing contours on a binary mask and splitting them by area.
"""

import logging

import cv2

logger = logging.getLogger(__name__)


def find_all_contours(binary_img):
    """
    Find every contour on a binary image, outer borders and hole borders alike.

    Dice come out as outer borders and pips as hole borders inside them, so the
    trace runs in list mode (no hierarchy) and keeps every boundary point.

    Parameters
    ----------
    binary_img : np.ndarray
        Binary/single-channel image for contour detection. Not modified.

    Returns
    -------
    contours : list of np.ndarray
        Contours of shape (N, 1, 2). Order is not meaningful.

    Raises
    ------
    ValueError
        If input is None or not single-channel.
    """
    if binary_img is None:
        raise ValueError("binary_img is None.")

    if len(binary_img.shape) != 2:
        raise ValueError("binary_img must be single-channel (binary).")

    contours, _ = cv2.findContours(
        binary_img.copy(),
        cv2.RETR_LIST,
        cv2.CHAIN_APPROX_NONE,
    )

    logger.debug("Total contours found: %d", len(contours))
    return list(contours)


def contour_areas(contours):
    """Return the enclosed area of each contour."""
    return [cv2.contourArea(c) for c in contours]


def filter_contours_by_area(contours, min_area, max_area):
    """
    Keep the contours whose area lies strictly between min_area and max_area.

    Parameters
    ----------
    contours : list of np.ndarray
        Contours to filter.
    min_area : float
        Minimum area (exclusive).
    max_area : float
        Maximum area (exclusive).

    Returns
    -------
    filtered_contours : list
        Contours with min_area < area < max_area. Empty if none qualify.
    """
    filtered_contours = []
    for c in contours:
        area = cv2.contourArea(c)
        if min_area < area < max_area:
            filtered_contours.append(c)

    logger.debug(
        "Contours after area filter (%s, %s): %d of %d",
        min_area, max_area, len(filtered_contours), len(contours),
    )
    return filtered_contours
