# game.py

class Game:
    def update(self, now):
        """Advance timers and dialogs to the given clock time."""
        pass

    def render(self, frame):
        """Render visuals on the frame. May return an action string instead."""
        pass

    def handle_input(self, hand_data):
        """Process the latest hand data from the frame callback."""
        pass

    def handle_click(self, x, y):
        """Mouse click at window pixel (x, y)."""
        pass

    def handle_key(self, key):
        """Key code from cv2.waitKey."""
        pass

    def reset(self):
        """Reset state."""
        pass

    def is_menu(self):
        """Return True if this is a menu, False if a playable game."""
        return False
