import re

import pytest

from pixi_palette.random_source import RandomSource

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class ScriptedSource(RandomSource):
    """Replays fixed draws so generation paths can be checked exactly."""

    def __init__(self, ints=(), floats=()):
        super().__init__(0)
        self._ints = list(ints)
        self._floats = list(floats)

    def next_int(self, n):
        if self._ints:
            return self._ints.pop(0) % n
        return 0

    def next_float(self):
        if self._floats:
            return self._floats.pop(0)
        return 0.0


@pytest.fixture
def rng():
    return RandomSource(1234)


@pytest.fixture
def scripted():
    return ScriptedSource


def is_hex(value):
    return bool(HEX_RE.match(value))
