import matplotlib

matplotlib.use("Agg")

import cv2
import numpy as np
import pytest


DIE_ORIGIN = 50
DIE_SIZE = 100
PIP_SIZE = 17
PIP_ORIGINS = [(60, 60), (90, 90), (120, 120)]


def draw_die(img, pips=PIP_ORIGINS):
    """Draw a white die with black square pips onto a BGR image."""
    x0 = y0 = DIE_ORIGIN
    img[y0:y0 + DIE_SIZE, x0:x0 + DIE_SIZE] = 255
    for px, py in pips:
        img[py:py + PIP_SIZE, px:px + PIP_SIZE] = 0
    return img


@pytest.fixture
def blank_image():
    return np.zeros((300, 300, 3), dtype=np.uint8)


@pytest.fixture
def three_pip_die(blank_image):
    return draw_die(blank_image)


@pytest.fixture
def empty_die(blank_image):
    return draw_die(blank_image, pips=[])


@pytest.fixture
def three_pip_die_file(tmp_path, three_pip_die):
    path = tmp_path / "dice.png"
    assert cv2.imwrite(str(path), three_pip_die)
    return path


def square(x, y, side):
    """Closed square contour in the (N, 1, 2) int32 layout findContours produces."""
    pts = [(x, y), (x + side, y), (x + side, y + side), (x, y + side)]
    return np.array(pts, dtype=np.int32).reshape(-1, 1, 2)
