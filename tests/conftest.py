import pytest


class SequenceRandom:
    """按順序返回預設點數的假隨機源"""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        self.calls.append((a, b))
        return value


@pytest.fixture
def rigged():
    return SequenceRandom
