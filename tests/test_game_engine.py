import collections
import os
import random
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from pong_duel.constants import BALL_COLOR, PADDLE_COLOR  # noqa: E402
from pong_duel.controls import ControlState  # noqa: E402
from pong_duel.game_engine import GameEngine  # noqa: E402
from pong_duel.paddle import Side  # noqa: E402


class TestControls(unittest.TestCase):
    def test_from_keys_uses_default_bindings(self):
        pressed = collections.defaultdict(bool, {pygame.K_a: True, pygame.K_n: True})
        controls = ControlState.from_keys(pressed)
        self.assertEqual(controls.for_side(Side.LEFT), (True, False))
        self.assertEqual(controls.for_side(Side.RIGHT), (False, True))

    def test_custom_bindings(self):
        bindings = {
            Side.LEFT: (pygame.K_w, pygame.K_s),
            Side.RIGHT: (pygame.K_UP, pygame.K_DOWN),
        }
        pressed = collections.defaultdict(bool, {pygame.K_UP: True})
        controls = ControlState.from_keys(pressed, bindings)
        self.assertTrue(controls.right_up)
        self.assertFalse(controls.left_up)


class TestGameEngine(unittest.TestCase):
    def setUp(self):
        self.engine = GameEngine(800, 600, rng=random.Random(3))

    def test_startup_layout(self):
        left, right = self.engine.paddles
        self.assertEqual((left.side, right.side), (Side.LEFT, Side.RIGHT))
        self.assertEqual((left.x, right.x), (-365.0, 365.0))
        self.assertEqual((self.engine.ball.x, self.engine.ball.y), (0.0, 0.0))
        self.assertAlmostEqual(self.engine.ball.speed(), 400.0)
        self.assertEqual(self.engine.score.read(), (0, 0))

    def test_too_small_window(self):
        with self.assertRaises(ValueError):
            GameEngine(800, 90)

    def test_window_too_narrow_for_paddles(self):
        # paddle insets overlap, so the left paddle spawns right of the right one
        with self.assertRaises(AssertionError):
            GameEngine(50, 600)

    def test_update_moves_paddles_then_ball(self):
        ball = self.engine.ball
        vx, vy = ball.vx, ball.vy
        self.engine.update(0.1, ControlState(left_up=True, right_down=True))
        self.assertAlmostEqual(self.engine.paddle(Side.LEFT).y, 50.0)
        self.assertAlmostEqual(self.engine.paddle(Side.RIGHT).y, -50.0)
        self.assertAlmostEqual(ball.x, vx * 0.1)
        self.assertAlmostEqual(ball.y, vy * 0.1)

    def test_goal_updates_score_labels(self):
        ball = self.engine.ball
        ball.x, ball.y = -394.0, 0.0
        ball.vx, ball.vy = -400.0, 0.0
        self.engine.update(0.01, ControlState())

        self.assertEqual(self.engine.score.read(), (0, 1))
        self.assertEqual((ball.x, ball.y), (0.0, 0.0))
        self.assertGreater(ball.vx, 0)
        self.assertEqual([label.text for label in self.engine.labels], ["0", "1"])

    def test_quit_events(self):
        self.engine.handle_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)])
        self.assertFalse(self.engine.request_quit)
        self.engine.handle_events([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)])
        self.assertTrue(self.engine.request_quit)

    def test_to_screen(self):
        self.assertEqual(self.engine.to_screen(0, 0), (400.0, 300.0))
        self.assertEqual(self.engine.to_screen(-100, 50), (300.0, 250.0))


class TestRender(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def test_render_draws_entities(self):
        engine = GameEngine(800, 600, rng=random.Random(3))
        surface = pygame.Surface((800, 600))
        engine.render(surface)

        self.assertEqual(tuple(surface.get_at((400, 300)))[:3], BALL_COLOR)
        self.assertEqual(tuple(surface.get_at((35, 300)))[:3], PADDLE_COLOR)
        self.assertEqual(tuple(surface.get_at((765, 300)))[:3], PADDLE_COLOR)

    def test_label_surface_is_reused_until_score_changes(self):
        engine = GameEngine(800, 600, rng=random.Random(3))
        surface = pygame.Surface((800, 600))
        engine.render(surface)
        first = engine._label_surface(engine.labels[1])
        engine.render(surface)
        self.assertIs(engine._label_surface(engine.labels[1]), first)

        engine.score.increment_right()
        engine.update(0.0, ControlState())
        self.assertIsNot(engine._label_surface(engine.labels[1]), first)


if __name__ == "__main__":
    unittest.main()
