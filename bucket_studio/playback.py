from .settings import INITIAL_SPEED, MAX_SPEED, MIN_SPEED


class StepCursor:
    """
    Position over a finished step sequence, for whatever drives the display.
    Owns no timer: call tick() every `interval` seconds while playing.
    Index moves are clamped to the sequence, never wrapped.
    """

    def __init__(self, steps, speed=INITIAL_SPEED):
        self.speed = speed
        self.reset(steps)

    def reset(self, steps):
        if not steps:
            raise ValueError("cannot step through an empty sequence")
        self.steps   = tuple(steps)
        self.index   = 0
        self.playing = False

    # ---------- position ----------

    @property
    def last(self) -> int:
        return len(self.steps) - 1

    @property
    def current(self):
        return self.steps[self.index]

    @property
    def at_end(self) -> bool:
        return self.index >= self.last

    def seek(self, index: int):
        self.index = max(0, min(index, self.last))
        return self.current

    def step_forward(self):
        return self.seek(self.index + 1)

    def step_backward(self):
        return self.seek(self.index - 1)

    # ---------- play mode ----------

    @property
    def speed(self) -> int:
        return self._speed

    @speed.setter
    def speed(self, value: int):
        self._speed = max(MIN_SPEED, min(int(value), MAX_SPEED))

    @property
    def interval(self) -> float:
        """Seconds between ticks; higher speed means shorter waits."""
        return (MAX_SPEED + 1 - self._speed) / 1000.0

    def play(self):
        self.playing = not self.at_end

    def pause(self):
        self.playing = False

    def toggle(self):
        if self.playing: self.pause()
        else: self.play()

    def tick(self) -> bool:
        """Advance one step if playing. Returns True when the index moved."""
        if not self.playing:
            return False
        if self.at_end:
            self.playing = False
            return False
        self.index += 1
        if self.at_end:
            self.playing = False
        return True
