from dataclasses import dataclass

from .constants import PADDLE_HEIGHT, WALL_THICKNESS


@dataclass(frozen=True)
class FieldBounds:
    """
    Edges of the play field in centre-origin, y-up world units.

    top/bottom are the centre lines of the horizontal walls; left/right are
    the scoring lines. Built once from the viewport and never changed.
    """
    top: float
    bottom: float
    left: float
    right: float
    wall_thickness: float = WALL_THICKNESS

    @classmethod
    def from_viewport(cls, width: float, height: float,
                      wall_thickness: float = WALL_THICKNESS,
                      paddle_height: float = PADDLE_HEIGHT) -> "FieldBounds":
        half_wall = wall_thickness / 2.0
        bounds = cls(
            top=height / 2.0 - half_wall,
            bottom=-height / 2.0 + half_wall,
            left=-width / 2.0 + half_wall,
            right=width / 2.0 - half_wall,
            wall_thickness=wall_thickness,
        )
        low, high = bounds.paddle_range(paddle_height / 2.0)
        if low > high:
            raise ValueError(
                f"viewport {width}x{height} is too small for a paddle of height {paddle_height}"
            )
        return bounds

    @property
    def inner_top(self) -> float:
        return self.top - self.wall_thickness / 2.0

    @property
    def inner_bottom(self) -> float:
        return self.bottom + self.wall_thickness / 2.0

    def paddle_range(self, half_height: float):
        # (lowest, highest) centre y a paddle may take
        return self.inner_bottom + half_height, self.inner_top - half_height
