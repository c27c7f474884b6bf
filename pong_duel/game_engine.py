import logging
import random

import pygame

from . import collision
from .ball import Ball
from .constants import (
    BALL_COLOR,
    BALL_SIZE,
    BALL_SPEED,
    DASH_COUNT,
    DASH_WIDTH,
    PADDLE_COLOR,
    PADDLE_HEIGHT,
    PADDLE_INSET,
    PADDLE_WIDTH,
    SCORE_FONT_SIZE,
    SCORE_OFFSET_X,
    SCORE_OFFSET_Y,
    TEXT_COLOR,
    WALL_COLOR,
    WALL_THICKNESS,
)
from .controls import QUIT_KEYS, ControlState
from .field import FieldBounds
from .paddle import Paddle, Side
from .score import Score, ScoreLabel, sync_labels

logger = logging.getLogger(__name__)


# ----------------- Game Engine -----------------
class GameEngine:
    def __init__(self, width, height, rng=None):
        self.width = width
        self.height = height
        self.bounds = FieldBounds.from_viewport(width, height, WALL_THICKNESS, PADDLE_HEIGHT)

        # Entities: fixed for the whole session
        self.paddles = (
            Paddle(Side.LEFT, self.bounds.left + PADDLE_INSET, 0.0, PADDLE_WIDTH, PADDLE_HEIGHT),
            Paddle(Side.RIGHT, self.bounds.right - PADDLE_INSET, 0.0, PADDLE_WIDTH, PADDLE_HEIGHT),
        )
        self.ball = Ball(0.0, 0.0, BALL_SIZE, BALL_SPEED, rng=rng or random.Random())
        self._check_entities()

        self.score = Score()
        self.labels = (ScoreLabel(Side.LEFT), ScoreLabel(Side.RIGHT))

        self.request_quit = False

        # UI, created on first render
        self._font = None
        self._label_cache = {}

        logger.info("Field %dx%d, bounds %s", width, height, self.bounds)

    def _check_entities(self):
        sides = [paddle.side for paddle in self.paddles]
        assert len(self.paddles) == 2, "expected exactly two paddles"
        assert sides == [Side.LEFT, Side.RIGHT], f"unexpected paddle sides {sides}"
        left, right = self.paddles
        assert left.x < right.x, f"paddles crossed: {left!r}, {right!r}"

    def paddle(self, side: Side) -> Paddle:
        return self.paddles[0] if side is Side.LEFT else self.paddles[1]

    # ---------- Input ----------
    def handle_events(self, events):
        for event in events:
            if event.type == pygame.QUIT:
                self.request_quit = True
            elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                self.request_quit = True

    # ---------- Update ----------
    def update(self, dt: float, controls: ControlState):
        for paddle in self.paddles:
            up, down = controls.for_side(paddle.side)
            paddle.move(up, down, dt, self.bounds)

        self.ball.advance(dt)
        collision.resolve(self.ball, self.paddles, self.bounds, self.score)

        sync_labels(self.score, self.labels)

    # ---------- Render ----------
    def to_screen(self, x, y):
        return self.width / 2.0 + x, self.height / 2.0 - y

    def _entity_rect(self, x, y, w, h):
        sx, sy = self.to_screen(x, y)
        return pygame.Rect(int(sx - w / 2.0), int(sy - h / 2.0), int(w), int(h))

    def _label_surface(self, label):
        cached = self._label_cache.get(label.side)
        if cached is None or cached[0] != label.revision:
            if self._font is None:
                self._font = pygame.font.Font(None, SCORE_FONT_SIZE)
            cached = (label.revision, self._font.render(label.text, True, TEXT_COLOR))
            self._label_cache[label.side] = cached
        return cached[1]

    def render(self, screen):
        # Walls
        for wall_y in (self.bounds.top, self.bounds.bottom):
            screen.fill(WALL_COLOR, self._entity_rect(0.0, wall_y, self.width, WALL_THICKNESS))

        # Dashed centre line
        dash_height = self.height / (DASH_COUNT * 2)
        for i in range(DASH_COUNT):
            y = -self.height / 2.0 + (i * 2 + 1) * dash_height
            screen.fill(WALL_COLOR, self._entity_rect(0.0, y, DASH_WIDTH, dash_height))

        for paddle in self.paddles:
            pygame.draw.rect(screen, PADDLE_COLOR,
                             self._entity_rect(paddle.x, paddle.y, paddle.width, paddle.height))
        pygame.draw.rect(screen, BALL_COLOR,
                         self._entity_rect(self.ball.x, self.ball.y, self.ball.width, self.ball.height))

        # HUD
        label_y = self.height / 2.0 - SCORE_OFFSET_Y
        for label in self.labels:
            offset = -SCORE_OFFSET_X if label.side is Side.LEFT else SCORE_OFFSET_X
            surf = self._label_surface(label)
            screen.blit(surf, surf.get_rect(center=self.to_screen(offset, label_y)))
