import pytest


class ScriptedRandom:
    """Deterministic random source: every open chance fires (or not) and every choice picks ``options[index]``."""

    def __init__(self, fire: bool = True, index: int = 0) -> None:
        self.fire = fire
        self.index = index

    def chance(self, p: float) -> bool:
        if p <= 0:
            return False
        if p >= 1:
            return True
        return self.fire

    def choice(self, options):
        return options[self.index]


@pytest.fixture
def always() -> ScriptedRandom:
    return ScriptedRandom(fire=True)


@pytest.fixture
def never() -> ScriptedRandom:
    return ScriptedRandom(fire=False)
