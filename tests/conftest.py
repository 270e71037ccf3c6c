import os
from types import SimpleNamespace

import numpy as np
import pytest

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


class FakeCapture:
    """Stands in for cv2.VideoCapture."""

    def __init__(self, opened=True, frames=None, width=640, height=480):
        self.opened = opened
        self.frames = list(frames or [])
        self.props = {3: width, 4: height}
        self.released = False

    def isOpened(self):
        return self.opened

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def get(self, prop):
        return self.props.get(prop, 0)

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True


# MediaPipe pose landmark indices
LEFT_WRIST = 15
RIGHT_WRIST = 16


def make_landmarks(hand_left=(0.25, 0.5), hand_right=(0.75, 0.5), visibility=0.9):
    """Landmarks as MediaPipe reports them on the unmirrored image."""
    landmarks = [SimpleNamespace(x=0.5, y=0.5, z=0.0, visibility=0.9) for _ in range(33)]
    landmarks[LEFT_WRIST] = SimpleNamespace(x=hand_left[0], y=hand_left[1], z=-0.1, visibility=visibility)
    landmarks[RIGHT_WRIST] = SimpleNamespace(x=hand_right[0], y=hand_right[1], z=-0.2, visibility=0.9)
    return SimpleNamespace(landmark=landmarks)


class FakePose:
    """Stands in for mediapipe's Pose solution."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.closed = False
        self.processed = 0
        self.images = []

    def process(self, image):
        self.processed += 1
        self.images.append(image)
        landmarks = self.results.pop(0) if self.results else None
        return SimpleNamespace(pose_landmarks=landmarks)

    def close(self):
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def color_image():
    image = np.zeros((480, 640, 3), dtype=np.uint8)
    # mark the left edge so mirroring is visible
    image[:, :10] = 255
    return image
