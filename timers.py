# timers.py

import time


class IntervalTimer:
    """Fixed-interval timer polled from the UI loop.

    Starting a timer restarts its interval. Ticks are scheduled on the
    interval grid, not on the poll that noticed them. A due timer fires once
    per poll; when it falls more than one interval behind it resyncs to now
    instead of replaying the missed ticks.
    """

    def __init__(self, interval_ms, on_tick, clock=time.monotonic):
        self.interval = interval_ms / 1000.0
        self.on_tick = on_tick
        self.clock = clock
        self.is_running = False
        self.last_tick = None

    def start(self):
        self.is_running = True
        self.last_tick = self.clock()

    def stop(self):
        self.is_running = False

    def poll(self, now=None):
        if not self.is_running:
            return False
        if now is None:
            now = self.clock()
        if now - self.last_tick < self.interval:
            return False
        if now - self.last_tick >= 2 * self.interval:
            self.last_tick = now
        else:
            self.last_tick += self.interval
        self.on_tick()
        return True


class Dispatcher:
    """Runs every registered timer on the calling thread, in registration order."""

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.timers = []

    def create_timer(self, interval_ms, on_tick):
        timer = IntervalTimer(interval_ms, on_tick, clock=self.clock)
        self.timers.append(timer)
        return timer

    def run_pending(self, now=None):
        if now is None:
            now = self.clock()
        fired = 0
        for timer in list(self.timers):
            # a timer stopped by an earlier tick in this pass is skipped by poll
            if timer.poll(now):
                fired += 1
        return fired
