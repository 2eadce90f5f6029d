# playback.py
"""
Playback controller for precomputed simulation steps.

The controller is a small state machine: a cursor over the step list plus a
playing flag. It owns no timer itself; whoever drives it (the Streamlit rerun
loop in app.py) calls tick() once every `interval` seconds while playing.
"""

from typing import List, Optional, Sequence

from engine import InvalidConfiguration, Step, compute_stats, describe_step

MIN_SPEED = 0.2
MAX_SPEED = 2.0
DEFAULT_SPEED = 1.0


class PlaybackController:
    """
    Cursor over a step sequence with play / pause / step / reset.

    Attributes:
        steps (Sequence[Step]): The precomputed simulation output
        position (int): Number of steps revealed so far (0..len(steps))
        playing (bool): True while the ticker should advance the cursor
        speed (float): Playback speed in steps per second
    """

    def __init__(self, steps: Sequence[Step], speed: float = DEFAULT_SPEED):
        self.steps = tuple(steps)
        self.position = 0
        self.playing = False
        self.speed = DEFAULT_SPEED
        self.set_speed(speed)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def total(self) -> int:
        return len(self.steps)

    @property
    def current(self) -> Optional[Step]:
        """The most recently revealed step, None before the first step."""
        if self.position == 0:
            return None
        return self.steps[self.position - 1]

    @property
    def finished(self) -> bool:
        return self.position >= self.total

    @property
    def interval(self) -> float:
        """Seconds between ticks at the current speed."""
        return 1.0 / self.speed

    # =========================================================================
    # CONTROLS
    # =========================================================================

    def set_speed(self, speed: float):
        if not (MIN_SPEED <= speed <= MAX_SPEED):
            raise InvalidConfiguration(
                f"Playback speed must be between {MIN_SPEED} and {MAX_SPEED} steps/sec, got {speed}"
            )
        self.speed = float(speed)

    def step(self) -> bool:
        """Reveal the next step. Advancing past the last step is a no-op."""
        if self.finished:
            return False
        self.position += 1
        return True

    def play(self):
        if not self.finished:
            self.playing = True

    def pause(self):
        self.playing = False

    def toggle(self):
        if self.playing:
            self.pause()
        else:
            self.play()

    def reset(self):
        self.position = 0
        self.playing = False

    def seek(self, position: int):
        self.position = max(0, min(position, self.total))
        if self.finished:
            self.playing = False

    def tick(self) -> bool:
        """
        One timer firing: advance while playing, pause at the end.

        Returns:
            bool: True if the cursor moved
        """
        if not self.playing:
            return False
        moved = self.step()
        if self.finished:
            self.playing = False
        return moved

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    def stats(self):
        """Statistics as of the current cursor position."""
        return compute_stats(self.steps, self.position)

    def event_log(self, limit: Optional[int] = None) -> List[str]:
        """Event lines for the revealed steps, oldest first."""
        lines: List[str] = []
        for step in self.steps[:self.position]:
            lines.extend(describe_step(step))
        if limit is not None:
            lines = lines[-limit:] if limit > 0 else []
        return lines
