# sensor.py

import cv2
import mediapipe as mp
import numpy as np

import config

TRACKED = 'Tracked'
POSITION_ONLY = 'PositionOnly'
NOT_TRACKED = 'NotTracked'

# Joint name -> MediaPipe pose landmark name
JOINT_LANDMARKS = {
    'Head': 'NOSE',
    'ShoulderLeft': 'LEFT_SHOULDER',
    'ShoulderRight': 'RIGHT_SHOULDER',
    'ElbowLeft': 'LEFT_ELBOW',
    'ElbowRight': 'RIGHT_ELBOW',
    'HandLeft': 'LEFT_WRIST',
    'HandRight': 'RIGHT_WRIST',
}


class Joint:
    def __init__(self, name, x, y, z=0.0, visibility=1.0):
        self.name = name
        self.x = x
        self.y = y
        self.z = z
        self.visibility = visibility

    @property
    def position(self):
        return self.x, self.y, self.z


class Skeleton:
    def __init__(self, tracking_state, joints=None):
        self.tracking_state = tracking_state
        self.joints = joints or {}

    def joint(self, name):
        return self.joints.get(name)


class SensorFrame:
    """One tick of sensor data. color and skeletons are None when that stream had nothing."""

    def __init__(self, color=None, skeletons=None):
        self.color = color
        self.skeletons = skeletons


def first_tracked_skeleton(skeletons):
    if not skeletons:
        return None
    for skeleton in skeletons:
        if skeleton.tracking_state == TRACKED:
            return skeleton
    return None


def _default_pose_factory():
    return mp.solutions.pose.Pose(
        min_detection_confidence=config.POSE_DETECTION_CONFIDENCE,
        min_tracking_confidence=config.POSE_TRACKING_CONFIDENCE,
    )


class SkeletonSensor:
    """Color + skeleton streams from the first connected camera.

    Frames are pulled with pump() from the UI loop and handed to every
    registered frames-ready handler.
    """

    def __init__(self, camera_indices=config.CAMERA_INDICES,
                 width=config.COLOR_WIDTH, height=config.COLOR_HEIGHT, fps=config.COLOR_FPS,
                 capture_factory=cv2.VideoCapture, pose_factory=_default_pose_factory):
        self.camera_indices = camera_indices
        self.requested_size = (width, height)
        self.fps = fps
        self.capture_factory = capture_factory
        self.pose_factory = pose_factory
        self.mp_pose = mp.solutions.pose

        self.cap = None
        self.pose = None
        self.camera_index = None
        self.frame_width = width
        self.frame_height = height
        self.color_pixels = None
        self.running = False
        self.handlers = []

    @property
    def connected(self):
        return self.cap is not None

    def open(self):
        for index in self.camera_indices:
            cap = self.capture_factory(index)
            if cap.isOpened():
                self.cap = cap
                self.camera_index = index
                break
            cap.release()

        if self.cap is None:
            print("--- WARNING: No connected camera found. Running without video or gestures. ---")
            return False

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.requested_size[0])
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.requested_size[1])
        self.cap.set(cv2.CAP_PROP_FPS, self.fps)
        self.frame_width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH)) or self.requested_size[0]
        self.frame_height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT)) or self.requested_size[1]
        self.color_pixels = np.zeros((self.frame_height, self.frame_width, 3), dtype=np.uint8)

        self.pose = self.pose_factory()
        print(f"Camera {self.camera_index} found: {self.frame_width}x{self.frame_height} @ {self.fps}fps")
        return True

    def add_frames_ready_handler(self, handler):
        self.handlers.append(handler)

    def start(self):
        if self.connected:
            self.running = True

    def pump(self):
        """Reads one frame pair and dispatches it. Returns the SensorFrame or None."""
        if not self.running:
            return None

        success, image = self.cap.read()
        if not success or image is None or image.shape[1] == 0:
            frame = SensorFrame()
        else:
            if image.shape[:2] != self.color_pixels.shape[:2]:
                image = cv2.resize(image, (self.frame_width, self.frame_height))
            np.copyto(self.color_pixels, cv2.flip(image, 1))
            frame = SensorFrame(self.color_pixels, self.track_skeletons(image))

        for handler in self.handlers:
            handler(frame)
        return frame

    def track_skeletons(self, image):
        """Tracks the unmirrored image so MediaPipe's LEFT_* landmarks are the player's left.

        Joint x is flipped to match the mirrored color buffer.
        """
        results = self.pose.process(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))
        if not results.pose_landmarks:
            return []

        landmarks = results.pose_landmarks.landmark
        joints = {}
        for name, landmark_name in JOINT_LANDMARKS.items():
            lm = landmarks[self.mp_pose.PoseLandmark[landmark_name].value]
            joints[name] = Joint(name, 1.0 - lm.x, lm.y, lm.z, lm.visibility)

        if joints['HandLeft'].visibility >= config.MIN_JOINT_VISIBILITY:
            state = TRACKED
        else:
            state = POSITION_ONLY
        return [Skeleton(state, joints)]

    def stop(self):
        self.running = False
        if self.cap is not None:
            self.cap.release()
            self.cap = None
        if self.pose is not None:
            self.pose.close()
            self.pose = None
