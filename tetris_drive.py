
"""Drive loop: fixed gravity timer plus accelerated fall while soft drop is held.

Both drivers call the same ``engine.tick()``; only the cadence differs.
Time is fed in by the frame loop through ``update(dt_ms)``.
"""
import logging
from typing import Callable, Optional

from tetris_engine import GameEngine, Snapshot

log = logging.getLogger(__name__)


class Timer:
    """Cancellable periodic timer advanced by elapsed milliseconds."""
    def __init__(self, interval_ms: float, callback: Callable[[], None]):
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms!r}")
        self.interval = interval_ms
        self.callback = callback
        self.acc = 0.0
        self.active = True
        self.fired = 0

    def cancel(self):
        self.active = False

    def advance(self, dt_ms: float):
        if not self.active: return
        self.acc += dt_ms
        while self.active and self.acc >= self.interval:
            self.acc -= self.interval
            self.fired += 1
            self.callback()


class DriveLoop:
    def __init__(self, engine: GameEngine, gravity_ms: Optional[int] = None, soft_drop_ms: Optional[int] = None):
        self.engine = engine
        self.gravity_ms = gravity_ms or engine.settings.gravity_ms
        self.soft_drop_ms = soft_drop_ms or engine.settings.soft_drop_ms
        self.gravity: Optional[Timer] = None
        self.accel: Optional[Timer] = None
        self.soft_drop_held = False
        engine.add_game_over_listener(self._on_game_over)

    @property
    def gravity_active(self) -> bool:
        return self.gravity is not None and self.gravity.active

    @property
    def accel_active(self) -> bool:
        return self.accel is not None and self.accel.active

    def start(self):
        """Start a fresh game and arm gravity."""
        self._cancel_all()
        self.soft_drop_held = False
        self.engine.reset()
        if self.engine.is_running:
            self.gravity = Timer(self.gravity_ms, self.engine.tick)

    reset = start

    def update(self, dt_ms: float):
        if self.gravity is not None: self.gravity.advance(dt_ms)
        if self.accel is not None: self.accel.advance(dt_ms)

    # ---------- soft drop ----------
    def soft_drop_start(self):
        if self.soft_drop_held or not self.engine.is_running: return
        self.soft_drop_held = True
        self.engine.tick()
        if self.accel is not None: self.accel.cancel()
        if self.engine.is_running:
            self.accel = Timer(self.soft_drop_ms, self._accel_step)

    def soft_drop_stop(self):
        self.soft_drop_held = False

    def _accel_step(self):
        if not self.soft_drop_held:
            self.accel.cancel()
            return
        self.engine.tick()

    # ---------- game over ----------
    def _on_game_over(self, snap: Snapshot):
        log.debug("halting drive loop")
        self._cancel_all()

    def _cancel_all(self):
        if self.gravity is not None: self.gravity.cancel()
        if self.accel is not None: self.accel.cancel()
