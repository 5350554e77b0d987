"""
Morphology Module - Binarization
================================

Grayscale conversion and fixed-threshold binarization.
"""

import cv2


def binarize(img_bgr, threshold_value=160, max_value=255):
    """
    Convert a BGR image to grayscale, then apply binary thresholding.

    Pixels brighter than threshold_value become max_value (dice faces),
    everything else becomes 0 (pips and background). The threshold is fixed;
    Otsu's method picks a poor cutoff when no dice are on the table.

    Parameters
    ----------
    img_bgr : np.ndarray
        Input BGR image from OpenCV.
    threshold_value : int
        Threshold value (0-255). Pixels must be strictly greater to pass.
    max_value : int
        Value assigned to foreground pixels (usually 255).

    Returns
    -------
    gray : np.ndarray
        Grayscale version of the input image.
    binary : np.ndarray
        Binary image (single channel).

    Raises
    ------
    ValueError
        If input image is None, empty, or not 3-channel.
    """
    if img_bgr is None or img_bgr.size == 0:
        raise ValueError("Input image is None or empty.")

    if img_bgr.ndim != 3 or img_bgr.shape[2] != 3:
        raise ValueError("img_bgr must be a 3-channel BGR image.")

    gray = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)

    _, binary = cv2.threshold(
        gray,
        threshold_value,
        max_value,
        cv2.THRESH_BINARY,
    )

    return gray, binary
