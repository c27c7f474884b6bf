"""Two-player Pong: paddles, ball, collisions and score on a fixed field."""

from .ball import Ball
from .field import FieldBounds
from .game_engine import GameEngine
from .paddle import Paddle, Side
from .score import Score

__all__ = [
    "Ball",
    "FieldBounds",
    "GameEngine",
    "Paddle",
    "Score",
    "Side",
]
