import random

import pytest

from params import TOY

@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def toy():
    return TOY
