# gesture_mapper.py

from helpers import calculate_distance


class UITarget:
    """A named on-screen rectangle that a hand can hover or activate."""

    def __init__(self, name, x, y, width, height):
        self.name = name
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.highlighted = False

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def rect(self):
        return self.x, self.y, self.x + self.width, self.y + self.height

    def distance_to(self, point):
        return calculate_distance(point, self.center)

    def contains(self, point):
        x1, y1, x2, y2 = self.rect
        return x1 <= point[0] <= x2 and y1 <= point[1] <= y2

    def __repr__(self):
        return f"UITarget({self.name!r}, center={self.center})"


class GestureMapper:
    """Hover / activate hit-testing of a hand position against fixed targets.

    Every update re-tests all targets: those within hover_radius are
    highlighted, the rest are cleared. A target within activate_radius fires
    once per continuous dwell unless refire is set, in which case it fires on
    every update.
    """

    def __init__(self, targets, hover_radius, activate_radius, refire=False):
        self.targets = list(targets)
        self.hover_radius = hover_radius
        self.activate_radius = activate_radius
        self.refire = refire
        self.latched = set()

    def update(self, hand_pos):
        """Returns the targets activated by this hand position."""
        activated = []
        for target in self.targets:
            distance = target.distance_to(hand_pos)
            if distance < self.hover_radius:
                target.highlighted = True
                if distance < self.activate_radius:
                    if self.refire or target.name not in self.latched:
                        activated.append(target)
                    self.latched.add(target.name)
                else:
                    self.latched.discard(target.name)
            else:
                target.highlighted = False
                self.latched.discard(target.name)
        return activated

    def target_at(self, point):
        for target in self.targets:
            if target.contains(point):
                return target
        return None

    def reset(self):
        self.latched.clear()
        for target in self.targets:
            target.highlighted = False


def find_caught_item(hand_pos, items, catch_box):
    """First item (in list order) whose top-left lies within catch_box of the hand."""
    if hand_pos is None:
        return None
    hand_x, hand_y = hand_pos
    for item in items:
        if abs(hand_x - item.x) < catch_box and abs(hand_y - item.y) < catch_box:
            return item
    return None
