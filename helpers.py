# helpers.py

import os

import cv2
import numpy as np
from PIL import Image, ImageDraw, ImageFont

import config


def calculate_distance(p1, p2):
    """Calculates the Euclidean distance between two points."""
    return float(np.linalg.norm(np.array(p1, dtype=float) - np.array(p2, dtype=float)))


def map_to_canvas(point, width, height):
    """Scales a normalized (x, y) point to canvas pixels."""
    return point[0] * width, point[1] * height


def blank_frame(width=config.COLOR_WIDTH, height=config.COLOR_HEIGHT):
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:] = config.UI_COLORS["background"]
    return frame


def _find_font():
    """Find a TTF/TTC font that can draw Hangul."""
    for path in config.FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    return None


FONT_PATH = _find_font()
if FONT_PATH:
    print(f"Using font: {FONT_PATH}")
else:
    print("Warning: No Hangul font found. Korean meanings may not render.")

_font_cache = {}


def get_font(size):
    """Get a cached PIL font at the given pixel size."""
    if size not in _font_cache:
        if FONT_PATH:
            _font_cache[size] = ImageFont.truetype(FONT_PATH, size)
        else:
            _font_cache[size] = ImageFont.load_default()
    return _font_cache[size]


def text_size(text, font_size):
    """Returns (width, height) of text drawn at font_size."""
    if not text:
        return 0, 0
    left, top, right, bottom = get_font(font_size).getbbox(text)
    return right - left, bottom - top


def put_text(img, text, pos, font_size, color_bgr):
    """
    Draw Unicode text on an OpenCV BGR image (in-place).
    pos = (x, y) of the top-left corner of the text.
    """
    if not text:
        return
    font = get_font(font_size)
    pil_img = Image.fromarray(cv2.cvtColor(img, cv2.COLOR_BGR2RGB))
    draw = ImageDraw.Draw(pil_img)
    color_rgb = (color_bgr[2], color_bgr[1], color_bgr[0])
    draw.text((int(pos[0]), int(pos[1])), text, font=font, fill=color_rgb)
    np.copyto(img, cv2.cvtColor(np.array(pil_img), cv2.COLOR_RGB2BGR))


def put_text_centered(img, text, center, font_size, color_bgr):
    w, h = text_size(text, font_size)
    put_text(img, text, (center[0] - w // 2, center[1] - h // 2), font_size, color_bgr)


def draw_button(frame, rect, label, highlighted=False, font_size=28):
    """Draws a filled button. rect is (x1, y1, x2, y2) in pixels."""
    x1, y1, x2, y2 = (int(v) for v in rect)
    fill = config.UI_COLORS["highlight"] if highlighted else config.UI_COLORS["button"]
    text_color = config.UI_COLORS["text_dark"] if highlighted else config.UI_COLORS["text_white"]
    cv2.rectangle(frame, (x1, y1), (x2, y2), fill, -1)
    cv2.rectangle(frame, (x1, y1), (x2, y2), config.UI_COLORS["button_border"], 2)
    put_text_centered(frame, label, ((x1 + x2) // 2, (y1 + y2) // 2), font_size, text_color)
