import pytest


class ScriptedRandom:
    """Stands in for random.Random: randint() hands out a fixed sequence of draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def randint(self, a, b):
        assert self.draws, f"ran out of scripted draws (asked for [{a}, {b}])"
        v = self.draws.pop(0)
        assert a <= v <= b, f"scripted draw {v} outside [{a}, {b}]"
        return v


@pytest.fixture
def scripted():
    return ScriptedRandom
