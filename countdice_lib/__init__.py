"""
Dice Pip Counting Library
=========================

A library for counting the pips on dice in a photo using computer vision
techniques.

Modules:
    - io: Image loading and saving
    - config: Calibration values and JSON overrides
    - morphology: Grayscale conversion and binarization
    - contours: Contour tracing and area classification
    - matching: Assigning pips to dice by point-in-polygon tests
    - display: Annotation, result window and debug views
    - pipeline: High-level orchestration function
    - cli: Command-line entry point
"""

# IO functions
from .io import load_image, save_image

# Config
from .config import DEFAULT_CONFIG, load_config, get_section

# Morphology functions
from .morphology import binarize

# Contour functions
from .contours import (
    find_all_contours,
    contour_areas,
    filter_contours_by_area,
)

# Matching functions
from .matching import (
    DieCount,
    representative_point,
    is_point_strictly_inside,
    is_contour_strictly_inside,
    count_dots_per_die,
)

# Display functions
from .display import (
    show_image,
    resize_to_screen,
    annotate_dice_counts,
    show_result,
)

# Pipeline functions
from .pipeline import count_dice, DiceCountResult

__version__ = "1.0.0"
__all__ = [
    # IO
    "load_image",
    "save_image",
    # Config
    "DEFAULT_CONFIG",
    "load_config",
    "get_section",
    # Morphology
    "binarize",
    # Contours
    "find_all_contours",
    "contour_areas",
    "filter_contours_by_area",
    # Matching
    "DieCount",
    "representative_point",
    "is_point_strictly_inside",
    "is_contour_strictly_inside",
    "count_dots_per_die",
    # Display
    "show_image",
    "resize_to_screen",
    "annotate_dice_counts",
    "show_result",
    # Pipeline
    "count_dice",
    "DiceCountResult",
]
