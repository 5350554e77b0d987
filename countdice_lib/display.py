"""
Display Module - Visualization and Annotation
=============================================

Functions for annotating the dice photo, showing the result window and
inspecting intermediate images.
"""

import cv2
import matplotlib.pyplot as plt

from .config import DEFAULT_CONFIG


# Default screen size limits
MAX_HEIGHT = DEFAULT_CONFIG["display"]["max_height"]
MAX_WIDTH = DEFAULT_CONFIG["display"]["max_width"]
WINDOW_NAME = DEFAULT_CONFIG["display"]["window_name"]


def show_image(img, title="Image", cmap_type=None):
    """
    Display an image with matplotlib (debug view of pipeline stages).
    Automatically handles BGR to RGB conversion for color images.

    Parameters
    ----------
    img : np.ndarray
        Image to display (BGR or grayscale).
    title : str
        Title for the plot.
    cmap_type : str or None
        Colormap type for matplotlib (only used for color images).
    """
    plt.figure(figsize=(6, 6))

    # If the image has 3 channels (color), convert from BGR to RGB
    if len(img.shape) == 3:
        img_rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        plt.imshow(img_rgb, cmap=cmap_type)
    else:
        # Grayscale images and binary masks
        plt.imshow(img, cmap='gray')

    plt.title(title)
    plt.axis('off')
    plt.show()


def resize_to_screen(img, max_width=MAX_WIDTH, max_height=MAX_HEIGHT):
    """
    Resize an image to fit within screen dimensions while maintaining aspect ratio.

    Parameters
    ----------
    img : np.ndarray
        Input image.
    max_width : int
        Maximum allowed width.
    max_height : int
        Maximum allowed height.

    Returns
    -------
    np.ndarray
        Resized image (or original if already fits).
    """
    h, w = img.shape[:2]
    if w <= max_width and h <= max_height:
        return img
    scale = min(max_width / float(w), max_height / float(h))
    new_w = int(w * scale)
    new_h = int(h * scale)
    return cv2.resize(img, (new_w, new_h), interpolation=cv2.INTER_AREA)


def annotate_dice_counts(
    img_bgr,
    die_counts,
    total_dots,
    die_contours,
    dot_contours,
    annotation=None,
):
    """
    Draw per-die pip counts, the total and all contours onto an image.

    The image is modified in place. Text goes first, then die outlines, then
    pip outlines, so outlines may cover the edges of the text.

    Parameters
    ----------
    img_bgr : np.ndarray
        BGR image to draw on.
    die_counts : list of DieCount
        Per-die counts; each count is written at the bottom-right corner
        of the die's bounding rectangle.
    total_dots : int
        Total pip count, written near the top-left corner.
    die_contours : list of np.ndarray
        Contours drawn in the die color.
    dot_contours : list of np.ndarray
        Contours drawn in the pip color.
    annotation : dict or None
        "annotation" config section. None uses the defaults.

    Returns
    -------
    np.ndarray
        The same image object, annotated.

    Raises
    ------
    ValueError
        If input image is None.
    """
    if img_bgr is None:
        raise ValueError("img_bgr is None.")

    style = dict(DEFAULT_CONFIG["annotation"])
    if annotation is not None:
        style.update(annotation)

    font = cv2.FONT_HERSHEY_SIMPLEX
    text_color = tuple(style["text_color"])

    for die in die_counts:
        x, y, w, h = die.bounding_rect
        cv2.putText(
            img_bgr,
            str(die.dot_count),
            (int(x + w), int(y + h)),
            font,
            style["count_font_scale"],
            text_color,
        )

    anchor_x, anchor_y = style["total_anchor"]
    cv2.putText(
        img_bgr,
        f"{style['total_label']} {total_dots}",
        (int(anchor_x), int(anchor_y)),
        font,
        style["total_font_scale"],
        text_color,
    )

    thickness = int(style["contour_thickness"])
    if die_contours:
        cv2.drawContours(img_bgr, die_contours, -1, tuple(style["dice_color"]), thickness)
    if dot_contours:
        cv2.drawContours(img_bgr, dot_contours, -1, tuple(style["dots_color"]), thickness)

    return img_bgr


def show_result(img, window_name=WINDOW_NAME, wait=True,
                max_width=MAX_WIDTH, max_height=MAX_HEIGHT):
    """
    Show the annotated image in an OpenCV window.

    With wait=True this blocks until a key is pressed, then closes the window.
    Images larger than the screen are shrunk for display only.
    """
    cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
    cv2.imshow(window_name, resize_to_screen(img, max_width, max_height))
    if wait:
        cv2.waitKey(0)
        cv2.destroyWindow(window_name)
