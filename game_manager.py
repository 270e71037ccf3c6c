# game_manager.py

import time

import cv2

import config
from helpers import blank_frame
from main_menu import MainMenu
from sensor import SkeletonSensor, first_tracked_skeleton
from word_game import WordGame


class GameManager:
    def __init__(self, start_app='menu', sensor=None, word_meanings=None,
                 refire=config.REFIRE_WHILE_DWELLING, clock=time.monotonic):
        self.word_meanings = word_meanings
        self.refire = refire
        self.clock = clock

        self.sensor = sensor or SkeletonSensor()
        self.sensor.open()
        self.sensor.add_frames_ready_handler(self.on_all_frames_ready)
        self.sensor.start()

        self.frame_size = (self.sensor.frame_width, self.sensor.frame_height)
        self.color_frame = None
        self.hand_data = {'skeleton_frame': False, 'found': False, 'hand_pos': None}

        self.window_name = config.MENU_WINDOW_NAME if start_app == 'menu' else config.GAME_WINDOW_NAME
        self.current_game = self.create_game(start_app)
        self.running = False

    def create_game(self, name):
        if name == 'menu':
            return MainMenu(refire=self.refire, clock=self.clock)
        if name == 'words':
            return WordGame(self.word_meanings, canvas_size=self.frame_size, clock=self.clock)
        raise ValueError(f"Unknown app: {name}")

    def on_all_frames_ready(self, frame):
        if frame.color is not None:
            self.color_frame = frame.color

        if frame.skeletons is None:
            self.hand_data = {'skeleton_frame': False, 'found': False, 'hand_pos': self.hand_data['hand_pos']}
            return

        skeleton = first_tracked_skeleton(frame.skeletons)
        if skeleton is not None:
            hand = skeleton.joint('HandLeft')
            self.hand_data = {'skeleton_frame': True, 'found': True, 'hand_pos': (hand.x, hand.y)}
        else:
            # keep the last known hand position
            self.hand_data = {'skeleton_frame': True, 'found': False, 'hand_pos': self.hand_data['hand_pos']}

    def on_mouse(self, event, x, y, flags, param):
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        if self.current_game.is_menu():
            self.current_game.handle_click(x, y, frame_size=self.frame_size)
        else:
            self.current_game.handle_click(x, y)

    def handle_action(self, action):
        """Returns False when the application should exit."""
        if action == "Start Word Game":
            self.current_game = self.create_game('words')
        elif action == "Exit":
            return False
        return True

    def step(self):
        """One pass of the UI loop. Returns the frame to show, or None to exit."""
        self.hand_data['skeleton_frame'] = False
        self.sensor.pump()
        frame = self.color_frame.copy() if self.color_frame is not None else blank_frame(*self.frame_size)

        self.current_game.handle_input(self.hand_data)
        self.current_game.update(self.clock())
        result = self.current_game.render(frame)
        if isinstance(result, str):
            if not self.handle_action(result):
                return None
            return frame
        return result

    def run(self):
        cv2.namedWindow(self.window_name)
        cv2.setMouseCallback(self.window_name, self.on_mouse)
        self.running = True
        try:
            while self.running:
                frame = self.step()
                if frame is None:
                    break
                cv2.imshow(self.window_name, frame)
                key = cv2.waitKey(1) & 0xFF
                if key == 255:
                    continue
                if key == ord('q') or key == 27:
                    break
                elif key == ord('m') and not self.current_game.is_menu():
                    self.current_game = self.create_game('menu')
                else:
                    self.current_game.handle_key(key)
        finally:
            self.running = False
            self.sensor.stop()
            cv2.destroyAllWindows()
