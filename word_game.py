# word_game.py

import json
import os
import random
import time

import cv2
import pygame

import config
from dialog import MessageDialog
from game import Game
from gesture_mapper import UITarget, find_caught_item
from helpers import draw_button, map_to_canvas, put_text, put_text_centered
from timers import Dispatcher

RUNNING = 'RUNNING'
PAUSED_FOR_QUIZ = 'PAUSED_FOR_QUIZ'


def load_word_bank(path):
    """Loads {"word": ["correct meaning", "decoy", "decoy", ...]} from a JSON file."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    validate_word_bank(data)
    return data


def validate_word_bank(word_meanings):
    if not isinstance(word_meanings, dict) or not word_meanings:
        raise ValueError("Word bank must be a non-empty object of word -> meanings")
    for word, meanings in word_meanings.items():
        if not isinstance(meanings, list) or len(meanings) < 3:
            raise ValueError(f"Word '{word}' needs a list of at least 3 meanings")
        if not all(isinstance(m, str) and m for m in meanings):
            raise ValueError(f"Word '{word}' has an empty or non-text meaning")


class WordItem:
    def __init__(self, text, x, y=0):
        self.text = text
        self.x = x
        self.y = y

    def __repr__(self):
        return f"WordItem({self.text!r}, x={self.x}, y={self.y})"


class WordGame(Game):
    def __init__(self, word_meanings=None, canvas_size=(config.COLOR_WIDTH, config.COLOR_HEIGHT),
                 rng=None, clock=time.monotonic, enable_sound=True):
        if word_meanings is None:
            word_meanings = config.WORD_MEANINGS
        self.word_meanings = word_meanings
        validate_word_bank(self.word_meanings)
        self.canvas_width, self.canvas_height = canvas_size
        self.random = rng or random.Random()
        self.clock = clock

        self.falling_words = []
        self.score = 0
        self.player_detected = False
        self.hand_pos = None
        self.current_word = None
        self.quiz_visible = False
        self.question_text = ""
        self.option_buttons = []

        self.dialog = MessageDialog(clock=clock)

        self.catch_sound = self.correct_sound = self.wrong_sound = None
        if enable_sound:
            self.init_sounds()

        self.dispatcher = Dispatcher(clock=clock)
        self.game_timer = self.dispatcher.create_timer(config.DESCENT_INTERVAL_MS, self.on_game_tick)
        self.word_drop_timer = self.dispatcher.create_timer(config.SPAWN_INTERVAL_MS, self.on_word_drop_tick)
        self.start_timers()

    def init_sounds(self):
        try:
            pygame.mixer.init()
            sounds = {}
            for name, filename in config.SOUND_FILES.items():
                path = os.path.join(config.SOUND_DIR, filename)
                sounds[name] = pygame.mixer.Sound(path) if os.path.exists(path) else None
            self.catch_sound = sounds['catch']
            self.correct_sound = sounds['correct']
            self.wrong_sound = sounds['wrong']
        except pygame.error as e:
            print(f"Sound init failed: {e}. Running without sound.")
            self.catch_sound = self.correct_sound = self.wrong_sound = None

    @staticmethod
    def play(sound):
        if sound:
            sound.play()

    @property
    def state(self):
        # the result message is modal, the game resumes when it closes
        if self.quiz_visible or self.dialog.visible:
            return PAUSED_FOR_QUIZ
        return RUNNING

    def start_timers(self):
        self.game_timer.start()
        self.word_drop_timer.start()

    def reset(self):
        self.falling_words = []
        self.score = 0
        self.current_word = None
        self.quiz_visible = False
        self.option_buttons = []
        self.dialog.dismiss()
        self.start_timers()

    # --- Frame callback input ---

    def handle_input(self, hand_data):
        if not hand_data.get('skeleton_frame'):
            return
        self.player_detected = hand_data['found']
        if hand_data['found']:
            self.hand_pos = map_to_canvas(hand_data['hand_pos'], self.canvas_width, self.canvas_height)

    # --- Timers ---

    def update(self, now=None):
        self.dialog.update(now)
        self.dispatcher.run_pending(now)

    def on_word_drop_tick(self):
        if self.player_detected:
            self.create_falling_word()

    def create_falling_word(self):
        word = self.random.choice(list(self.word_meanings.keys()))
        x = self.random.randrange(max(1, self.canvas_width - config.SPAWN_MARGIN))
        item = WordItem(word, x, 0)
        self.falling_words.append(item)
        return item

    def on_game_tick(self):
        for i in range(len(self.falling_words) - 1, -1, -1):
            word = self.falling_words[i]
            top = word.y
            word.y = top + config.DESCENT_STEP
            if top > self.canvas_height:
                self.falling_words.pop(i)
        if self.falling_words:
            self.track_left_hand()

    def track_left_hand(self):
        caught = find_caught_item(self.hand_pos, self.falling_words, config.CATCH_BOX)
        if caught:
            self.catch_word(caught)
        return caught

    # --- Quiz ---

    def catch_word(self, word):
        self.current_word = word
        self.falling_words.remove(word)
        self.pause_game()
        self.play(self.catch_sound)
        self.show_word_options(word.text)

    def show_word_options(self, word):
        self.question_text = f"What is the meaning of '{word}'?"
        correct, decoys = self.word_meanings[word][0], self.word_meanings[word][1:]
        options = [correct] + self.random.sample(decoys, 2)
        self.random.shuffle(options)

        button_w, button_h = self.canvas_width * 0.25, 60
        gap = (self.canvas_width - 3 * button_w) / 4
        top = self.canvas_height * 0.5
        self.option_buttons = [
            UITarget(option, gap + i * (button_w + gap), top, button_w, button_h)
            for i, option in enumerate(options)
        ]
        self.quiz_visible = True
        return options

    @property
    def options(self):
        return [button.name for button in self.option_buttons]

    def option_button_click(self, option):
        if not self.quiz_visible:
            return None
        correct = option == self.word_meanings[self.current_word.text][0]
        self.quiz_visible = False
        self.option_buttons = []
        self.current_word = None
        if correct:
            self.score += config.SCORE_INCREMENT
            self.play(self.correct_sound)
            self.dialog.show("Correct!", on_close=self.resume_game)
        else:
            self.play(self.wrong_sound)
            self.dialog.show("Wrong answer!", on_close=self.resume_game)
        return correct

    def pause_game(self):
        self.game_timer.stop()
        self.word_drop_timer.stop()

    def resume_game(self):
        self.game_timer.start()
        self.word_drop_timer.start()

    def handle_click(self, x, y):
        if self.dialog.visible:
            self.dialog.dismiss()
            return
        for button in self.option_buttons:
            if button.contains((x, y)):
                self.option_button_click(button.name)
                return

    def handle_key(self, key):
        if self.dialog.visible:
            self.dialog.dismiss()
            return
        if self.quiz_visible and ord('1') <= key <= ord('3'):
            self.option_button_click(self.option_buttons[key - ord('1')].name)

    # --- Drawing ---

    def render(self, frame):
        for word in self.falling_words:
            put_text(frame, word.text, (word.x, word.y), config.WORD_FONT_SIZE, config.UI_COLORS["text_white"])

        if self.hand_pos is not None:
            cv2.circle(frame, (int(self.hand_pos[0]), int(self.hand_pos[1])), 10, config.UI_COLORS["cursor"], -1)

        put_text(frame, f"Score: {self.score}", (10, 10), 28, config.UI_COLORS["score"])

        if self.quiz_visible:
            top = int(self.canvas_height * 0.3)
            cv2.rectangle(frame, (0, top), (self.canvas_width, int(self.canvas_height * 0.75)),
                          config.UI_COLORS["panel"], -1)
            put_text_centered(frame, self.question_text, (self.canvas_width // 2, top + 40), 28,
                              config.UI_COLORS["text_white"])
            for i, button in enumerate(self.option_buttons):
                draw_button(frame, button.rect, f"{i + 1}. {button.name}", font_size=24)

        return self.dialog.render(frame)
