import logging
import math
import random

from .constants import BALL_SIZE, BALL_SPEED, INITIAL_DIRECTION

logger = logging.getLogger(__name__)


def serve_velocity(bias: int, base_speed: float = BALL_SPEED, rng=random):
    """
    Velocity for a fresh serve.

    The x component is ``bias`` (+1 right, -1 left) and the y component is
    drawn from [-0.25, 0.25); the pair is normalized and scaled to
    ``base_speed``. ``rng`` only needs a ``random()`` method.
    """
    vy = (rng.random() - 0.5) * 0.5
    length = math.hypot(bias, vy)
    return bias / length * base_speed, vy / length * base_speed


class Ball:
    def __init__(self, x=0.0, y=0.0, size=BALL_SIZE, base_speed=BALL_SPEED, rng=None):
        self.x = float(x)
        self.y = float(y)
        self.width = size
        self.height = size
        self.base_speed = base_speed
        self.rng = rng if rng is not None else random.Random()

        dx, dy = INITIAL_DIRECTION
        length = math.hypot(dx, dy)
        self.vx = dx / length * base_speed
        self.vy = dy / length * base_speed

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_height(self) -> float:
        return self.height / 2.0

    def speed(self):
        return math.hypot(self.vx, self.vy)

    def advance(self, dt: float):
        # No clamping here; collisions are resolved in a separate pass
        self.x += self.vx * dt
        self.y += self.vy * dt

    def reset(self, bias: int):
        self.x = 0.0
        self.y = 0.0
        self.vx, self.vy = serve_velocity(bias, self.base_speed, self.rng)
        logger.debug("Serve towards %+d with velocity (%.1f, %.1f)", bias, self.vx, self.vy)
