# main_menu.py

import time

import cv2

import config
from dialog import MessageDialog
from game import Game
from gesture_mapper import GestureMapper, UITarget
from helpers import draw_button, put_text_centered


class MainMenu(Game):
    def __init__(self, refire=config.REFIRE_WHILE_DWELLING, clock=time.monotonic):
        width, height = config.MENU_BUTTON_SIZE
        self.buttons = [
            UITarget(name, cx - width / 2, cy - height / 2, width, height)
            for name, (cx, cy) in zip(config.MENU_ITEMS, config.MENU_BUTTON_CENTERS)
        ]
        self.mapper = GestureMapper(self.buttons, config.MENU_HOVER_RADIUS,
                                    config.MENU_ACTIVATE_RADIUS, refire=refire)
        self.dialog = MessageDialog(clock=clock)
        self.clock = clock

        # Click handlers per button
        self.click_handlers = {
            "Start Game": self.on_start_game_click,
            "Options": self.on_options_click,
            "Exit": self.on_exit_click,
        }

        self.cursor_pos = None
        self.pending_action = None
        self.click_count = 0

    def reset(self):
        self.mapper.reset()
        self.dialog.dismiss()
        self.cursor_pos = None
        self.pending_action = None

    def is_menu(self):
        return True

    def button(self, name):
        for button in self.buttons:
            if button.name == name:
                return button
        raise KeyError(name)

    def handle_input(self, hand_data):
        if not hand_data.get('found'):
            return
        self.cursor_pos = hand_data['hand_pos']
        # the message box is modal
        if self.dialog.visible:
            return
        for button in self.mapper.update(self.cursor_pos):
            self.click(button.name)

    def handle_click(self, x, y, frame_size=(config.COLOR_WIDTH, config.COLOR_HEIGHT)):
        if self.dialog.visible:
            self.dialog.dismiss()
            return
        point = (x / frame_size[0], y / frame_size[1])
        button = self.mapper.target_at(point)
        if button:
            self.click(button.name)

    def handle_key(self, key):
        if self.dialog.visible:
            self.dialog.dismiss()

    def click(self, name):
        self.click_count += 1
        self.click_handlers[name]()

    def on_start_game_click(self):
        self.dialog.show("Start Game Selected", on_close=lambda: self.request("Start Word Game"))

    def on_options_click(self):
        # No options screen yet
        self.dialog.show("Options Selected")

    def on_exit_click(self):
        self.dialog.show("Exit Selected", on_close=lambda: self.request("Exit"))

    def request(self, action):
        self.pending_action = action

    def update(self, now=None):
        self.dialog.update(now)

    def render(self, frame):
        if self.pending_action:
            action, self.pending_action = self.pending_action, None
            return action

        height, width, _ = frame.shape
        put_text_centered(frame, "Main Menu", (width // 2, int(height * 0.12)), 40, config.UI_COLORS["text_white"])

        for button in self.buttons:
            x1, y1, x2, y2 = button.rect
            draw_button(frame, (x1 * width, y1 * height, x2 * width, y2 * height),
                        button.name, highlighted=button.highlighted)

        if self.cursor_pos is not None:
            cursor = (int(self.cursor_pos[0] * width), int(self.cursor_pos[1] * height))
            cv2.circle(frame, cursor, 12, config.UI_COLORS["cursor"], -1)

        return self.dialog.render(frame)
