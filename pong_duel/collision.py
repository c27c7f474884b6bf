import logging
import math

from .constants import MAX_BOUNCE_ANGLE, SPEED_INCREASE
from .paddle import Side

logger = logging.getLogger(__name__)


def overlaps(ball, paddle) -> bool:
    # Strict AABB test on all four sides
    return (
        ball.x + ball.half_width > paddle.x - paddle.half_width
        and ball.x - ball.half_width < paddle.x + paddle.half_width
        and ball.y + ball.half_height > paddle.y - paddle.half_height
        and ball.y - ball.half_height < paddle.y + paddle.half_height
    )


def wall_bounce(ball, bounds) -> bool:
    # Velocity flips but the ball is not pushed back inside the field
    if (ball.y + ball.half_height > bounds.inner_top
            or ball.y - ball.half_height < bounds.inner_bottom):
        ball.vy = -ball.vy
        return True
    return False


def paddle_bounce(ball, paddle):
    """
    Send the ball away from ``paddle`` at an angle set by where it hit.

    The offset from the paddle centre is not clamped, so contact past the
    paddle edge yields an angle beyond 45 degrees.
    """
    offset = (ball.y - paddle.y) / paddle.half_height
    angle = offset * MAX_BOUNCE_ANGLE
    speed = ball.speed() * SPEED_INCREASE
    direction = paddle.side.bounce_direction

    ball.vx = direction * speed * math.cos(angle)
    ball.vy = speed * math.sin(angle)
    logger.debug("%s paddle hit: offset %.2f, speed %.1f", paddle.side.name, offset, speed)


def check_goal(ball, bounds):
    """Return the side that scores if the ball centre left the field."""
    if ball.x < bounds.left:
        return Side.RIGHT
    if ball.x > bounds.right:
        return Side.LEFT
    return None


def resolve(ball, paddles, bounds, score):
    """
    Run the collision pass for one frame.

    Order matters: wall reflection, then scoring and reset, then each paddle
    in the given order. Returns the scoring side or None.
    """
    wall_bounce(ball, bounds)

    scorer = check_goal(ball, bounds)
    if scorer is not None:
        score.increment(scorer)
        logger.debug("%s scores, now %d - %d", scorer.name, score.left, score.right)
        # A ball lost on the left is served to the right and vice versa
        ball.reset(bias=1 if scorer is Side.RIGHT else -1)

    for paddle in paddles:
        if overlaps(ball, paddle):
            paddle_bounce(ball, paddle)

    return scorer
