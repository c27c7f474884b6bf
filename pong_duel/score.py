from .paddle import Side


class Score:
    """Points per side plus a change flag for the score labels."""

    def __init__(self):
        self.left = 0
        self.right = 0
        self._changed = False

    def increment(self, side: Side):
        if side is Side.LEFT:
            self.left += 1
        else:
            self.right += 1
        self._changed = True

    def increment_left(self):
        self.increment(Side.LEFT)

    def increment_right(self):
        self.increment(Side.RIGHT)

    def read(self):
        return self.left, self.right

    def get(self, side: Side) -> int:
        return self.left if side is Side.LEFT else self.right

    @property
    def changed(self) -> bool:
        return self._changed

    def consume_change(self) -> bool:
        # True once per batch of increments
        changed, self._changed = self._changed, False
        return changed


class ScoreLabel:
    def __init__(self, side: Side, text="0"):
        self.side = side
        self.text = text
        # Bumped every time the text changes so renderers can re-blit
        self.revision = 0

    def set_text(self, text: str):
        if text != self.text:
            self.text = text
            self.revision += 1


def sync_labels(score: Score, labels):
    """Retext the labels if the score moved since the last sync."""
    if not score.consume_change():
        return False
    for label in labels:
        label.set_text(str(score.get(label.side)))
    return True
