# dialog.py

import time

import cv2

import config
from helpers import put_text_centered, text_size


class MessageDialog:
    """Centered message banner that closes itself after a while.

    Any key or click dismisses it early. on_close runs once when it closes.
    """

    def __init__(self, duration=config.DIALOG_DURATION, clock=time.monotonic):
        self.duration = duration
        self.clock = clock
        self.message = None
        self.shown_at = None
        self.on_close = None

    @property
    def visible(self):
        return self.message is not None

    def show(self, message, on_close=None):
        print(message)
        self.message = message
        self.shown_at = self.clock()
        self.on_close = on_close

    def dismiss(self):
        if not self.visible:
            return
        callback = self.on_close
        self.message = None
        self.shown_at = None
        self.on_close = None
        if callback:
            callback()

    def update(self, now=None):
        if not self.visible:
            return
        if now is None:
            now = self.clock()
        if now - self.shown_at >= self.duration:
            self.dismiss()

    def render(self, frame):
        if not self.visible:
            return frame
        height, width, _ = frame.shape
        font_size = 32
        text_w, text_h = text_size(self.message, font_size)
        box_w, box_h = max(text_w + 80, width // 3), text_h + 60
        x1, y1 = (width - box_w) // 2, (height - box_h) // 2
        cv2.rectangle(frame, (x1, y1), (x1 + box_w, y1 + box_h), config.UI_COLORS["dialog"], -1)
        cv2.rectangle(frame, (x1, y1), (x1 + box_w, y1 + box_h), config.UI_COLORS["button_border"], 2)
        put_text_centered(frame, self.message, (width // 2, height // 2), font_size, config.UI_COLORS["text_white"])
        return frame
