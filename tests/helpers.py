from typing import Iterable


class ScriptedSource:
    """Uniform source that replays a fixed list of draws."""

    def __init__(self, draws: Iterable[float]):
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls]
        self.calls += 1
        return value
