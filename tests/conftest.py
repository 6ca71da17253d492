import random

import pytest

from pwpattern import sampler


@pytest.fixture()
def seeded_random(monkeypatch):
    """Replace system random source by a seeded, reproducible one."""
    rng = random.Random(1234)
    monkeypatch.setattr(sampler, 'random', rng)
    return rng
