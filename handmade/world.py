"""World state and its physics step."""

from __future__ import annotations

from dataclasses import dataclass, field

# All accelerations are in pixels/s^2.
MAX_ACCEL = 800.0
GRAVITY = 400.0
# Ratio of drag acceleration to velocity, in 1/s.
DRAG = 1.0


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vec2:
        return Vec2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


def external_acc(pos: Vec2, vel: Vec2) -> Vec2:
    """Acceleration from gravity (pulling towards y = 0) and drag."""
    return Vec2(0.0, -GRAVITY if pos.y > 0.0 else GRAVITY) - DRAG * vel


@dataclass
class WorldState:
    """Position, motion and timers of the simulated world."""

    last_tick_ms: int = 0
    time_s: float = 0.0
    tone_hz: float = 30.0
    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    user_intent: Vec2 = field(default_factory=Vec2)
    last_acc: Vec2 = field(default_factory=Vec2)

    def update(self, tick_ms: int) -> None:
        """Advance the world to ``tick_ms`` with a velocity Verlet step."""
        if tick_ms < self.last_tick_ms:
            raise ValueError(
                f"tick {tick_ms} is earlier than the last tick {self.last_tick_ms}"
            )
        dt = (tick_ms - self.last_tick_ms) / 1000.0

        vhalf = self.vel + 0.5 * dt * self.last_acc
        self.pos = self.pos + vhalf * dt

        user_accel = MAX_ACCEL * self.user_intent
        self.last_acc = user_accel + external_acc(self.pos, self.vel)
        self.vel = self.vel + 0.5 * self.last_acc * dt

        self.last_tick_ms = tick_ms
        self.time_s += dt