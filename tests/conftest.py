import random
import sys
from pathlib import Path

import pytest

# Make the flat dashboard modules importable when running pytest from the repo root
THIS_DIR = Path(__file__).resolve().parent
ROOT_DIR = THIS_DIR.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from model import SamplePoint, make_series  # noqa: E402


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(455)


@pytest.fixture()
def fixed_series():
    # Flat 20.0 / 26.0 readings for every hour
    return make_series(SamplePoint(h, 20.0, 26.0) for h in range(24))
