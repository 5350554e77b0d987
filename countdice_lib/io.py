"""
IO Module - Image Loading and Saving
====================================

Functions for reading the input photo and writing the annotated result using OpenCV.
"""

import logging
import os

import cv2

logger = logging.getLogger(__name__)


def load_image(path):
    """
    Load a color image from disk.

    Parameters
    ----------
    path : str
        Path to an image file in any format OpenCV can decode.

    Returns
    -------
    np.ndarray
        3-channel BGR image.

    Raises
    ------
    FileNotFoundError
        If the path does not exist.
    ValueError
        If the file cannot be decoded as an image.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File does not exist: {path}")

    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not read image: {path}")

    logger.debug("Loaded %s (%dx%d)", path, img.shape[1], img.shape[0])
    return img


def save_image(path, img):
    """
    Encode an image to disk. The format follows the file extension.

    Parameters
    ----------
    path : str
        Output path, e.g. "labeled.png".
    img : np.ndarray
        Image to write.

    Raises
    ------
    ValueError
        If the image is None or the extension has no encoder.
    RuntimeError
        If the file could not be written (e.g. missing directory).
    """
    if img is None:
        raise ValueError("img is None.")

    extension = os.path.splitext(path)[1].lower()
    if not extension:
        raise ValueError(f"Output path has no file extension: {path}")

    if not cv2.haveImageWriter(path):
        raise ValueError(f"No image encoder for extension '{extension}': {path}")

    try:
        ok = cv2.imwrite(path, img)
    except cv2.error as e:
        raise RuntimeError(f"Could not write image to {path}: {e}") from e

    if not ok:
        raise RuntimeError(f"Could not write image: {path}")

    logger.info("Saved annotated image to %s", path)
