from enum import Enum

from .constants import PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_WIDTH


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def bounce_direction(self) -> int:
        # x direction the ball takes after hitting this side's paddle
        return 1 if self is Side.LEFT else -1


class Paddle:
    def __init__(self, side, x, y=0.0, width=PADDLE_WIDTH, height=PADDLE_HEIGHT):
        self._side = side
        self._x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        # Speeds are in pixels per second
        self.speed = PADDLE_SPEED

    @property
    def side(self) -> Side:
        return self._side

    @property
    def x(self) -> float:
        return self._x

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_height(self) -> float:
        return self.height / 2.0

    def move(self, up: bool, down: bool, dt: float, bounds):
        # Up and down are independent deltas; both pressed cancel out
        if up:
            self.y += self.speed * dt
        if down:
            self.y -= self.speed * dt
        low, high = bounds.paddle_range(self.half_height)
        self.y = max(low, min(self.y, high))

    def __repr__(self):
        return f"Paddle({self.side.name}, x={self.x:.1f}, y={self.y:.1f})"
