from dataclasses import dataclass

import pygame

from .paddle import Side

# (up, down) key per side
DEFAULT_BINDINGS = {
    Side.LEFT: (pygame.K_a, pygame.K_z),
    Side.RIGHT: (pygame.K_j, pygame.K_n),
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


@dataclass(frozen=True)
class ControlState:
    """Pressed state of the four paddle keys for one frame."""
    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False

    @classmethod
    def from_keys(cls, pressed, bindings=None):
        # pressed: anything indexable by key code, e.g. pygame.key.get_pressed()
        bindings = bindings or DEFAULT_BINDINGS
        left_up, left_down = bindings[Side.LEFT]
        right_up, right_down = bindings[Side.RIGHT]
        return cls(
            left_up=bool(pressed[left_up]),
            left_down=bool(pressed[left_down]),
            right_up=bool(pressed[right_up]),
            right_down=bool(pressed[right_down]),
        )

    def for_side(self, side: Side):
        if side is Side.LEFT:
            return self.left_up, self.left_down
        return self.right_up, self.right_down
