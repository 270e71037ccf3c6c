import pytest

pytest.importorskip("mediapipe")

from conftest import FakeCapture, FakeClock, FakePose, make_landmarks
from game_manager import GameManager
from main_menu import MainMenu
from sensor import SensorFrame, SkeletonSensor
from word_game import WordGame


def make_manager(color_image, landmarks, start_app='menu', frames=1):
    capture = FakeCapture(frames=[color_image.copy() for _ in range(frames)])
    pose = FakePose(landmarks)
    sensor = SkeletonSensor(camera_indices=(0,), capture_factory=lambda index: capture,
                            pose_factory=lambda: pose)
    return GameManager(start_app=start_app, sensor=sensor, clock=FakeClock())


def test_frame_callback_extracts_left_hand(color_image):
    manager = make_manager(color_image, [make_landmarks((0.25, 0.4))])
    manager.sensor.pump()
    assert manager.hand_data == {'skeleton_frame': True, 'found': True, 'hand_pos': (0.75, 0.4)}
    assert manager.color_frame is not None


def test_lost_skeleton_keeps_last_hand_position(color_image):
    manager = make_manager(color_image, [make_landmarks((0.25, 0.4)), None], frames=2)
    manager.sensor.pump()
    manager.sensor.pump()
    assert manager.hand_data == {'skeleton_frame': True, 'found': False, 'hand_pos': (0.75, 0.4)}


def test_missing_skeleton_frame_is_skipped(color_image):
    manager = make_manager(color_image, [make_landmarks((0.25, 0.4))])
    manager.sensor.pump()
    manager.on_all_frames_ready(SensorFrame())
    assert manager.hand_data['skeleton_frame'] is False
    assert manager.hand_data['hand_pos'] == (0.75, 0.4)


def test_step_drives_menu_from_hand(color_image):
    manager = make_manager(color_image, [make_landmarks((0.5, 0.5))])
    frame = manager.step()
    assert frame.shape == (480, 640, 3)
    assert manager.current_game.dialog.message == "Options Selected"


def test_step_without_camera_shows_blank_frame(color_image):
    sensor = SkeletonSensor(camera_indices=(0,), capture_factory=lambda index: FakeCapture(opened=False),
                            pose_factory=FakePose)
    manager = GameManager(sensor=sensor, clock=FakeClock())
    frame = manager.step()
    assert frame.shape == (480, 640, 3)
    assert manager.current_game.click_count == 0


def test_actions_switch_screens(color_image):
    manager = make_manager(color_image, [])
    assert isinstance(manager.current_game, MainMenu)
    assert manager.handle_action("Start Word Game")
    assert isinstance(manager.current_game, WordGame)
    assert not manager.handle_action("Exit")


def test_exit_action_ends_the_loop(color_image):
    manager = make_manager(color_image, [])
    manager.current_game.request("Exit")
    assert manager.step() is None


def test_unknown_app_is_rejected(color_image):
    manager = make_manager(color_image, [])
    with pytest.raises(ValueError):
        manager.create_game('tetris')
