"""
Config Module - Calibration Values
==================================

Named calibration values for the dice pipeline, grouped in sections.
Structure:
  - "binarize": fixed grayscale threshold
  - "dice" / "dots": exclusive area ranges used to classify contours
  - "matching": containment test options
  - "annotation": colors, font scales and anchors used when drawing
  - "display": result window settings

The defaults were measured on photos of white dice with black pips on a dark
table. A JSON file with the same layout may override any subset of them; the
file is only ever read.
"""

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    # Otsu is unreliable when the frame holds no dice, so the cutoff is fixed
    "binarize": {"thresh_value": 160, "max_value": 255},
    # A die face is ~11000 px
    "dice": {"min_area": 5000, "max_area": 30000},
    # A pip is ~400 px; side pips and small noise fall outside the range
    "dots": {"min_area": 200, "max_area": 1000},
    "matching": {"full_polygon_check": False},
    "annotation": {
        "text_color": [0, 255, 0],
        "count_font_scale": 1.0,
        "total_font_scale": 1.5,
        "total_anchor": [10, 35],
        "total_label": "Sum",
        "dice_color": [0, 255, 0],
        "dots_color": [255, 0, 0],
        "contour_thickness": 3,
    },
    "display": {"window_name": "Labeled Image", "max_width": 1920, "max_height": 1080},
}


def load_config(path=None):
    """
    Load configuration, optionally overriding defaults from a JSON file.

    Parameters
    ----------
    path : str or None
        Path to a JSON config file. None returns the defaults.

    Returns
    -------
    dict
        Configuration dictionary with every section of DEFAULT_CONFIG.

    Raises
    ------
    FileNotFoundError
        If path is given but does not exist.
    ValueError
        If the file is not valid JSON or a section is not an object.
    """
    config = _deep_copy(DEFAULT_CONFIG)
    if path is None:
        return config

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file does not exist: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {path} must contain a JSON object.")

    for section, values in overrides.items():
        if section not in config:
            logger.warning("Ignoring unknown config section '%s'", section)
            continue
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{section}' must be an object.")
        config[section].update(values)

    logger.debug("Loaded config from %s", path)
    return config


def get_section(config, section):
    """
    Get one section of a configuration, with defaults filled in.

    Parameters
    ----------
    config : dict or None
        Full configuration dictionary (None means defaults).
    section : str
        Section name ('binarize', 'dice', 'dots', ...).

    Returns
    -------
    dict
        Copy of the section merged over its defaults.
    """
    result = _deep_copy(DEFAULT_CONFIG[section])
    if config is not None:
        result.update(config.get(section, {}))
    return result


def _deep_copy(obj):
    """Create a deep copy of nested dicts."""
    if isinstance(obj, dict):
        return {k: _deep_copy(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return list(obj)
    return obj
