"""Decides when a visible row should trigger loading the next page."""

DEFAULT_LOOK_AHEAD = 5


class PrefetchPolicy:
    def __init__(self, look_ahead: int = DEFAULT_LOOK_AHEAD):
        if look_ahead < 0:
            raise ValueError("look_ahead must be at least 0")
        self.look_ahead = look_ahead

    def trigger_index(self, item_count: int) -> int:
        return max(item_count - 1 - self.look_ahead, 0)

    def should_trigger(self, index: int, item_count: int) -> bool:
        return index >= self.trigger_index(item_count)
