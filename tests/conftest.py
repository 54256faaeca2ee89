"""Shared pytest fixtures for the stroke recognizer tests."""

import numpy as np
import pytest

from stroke_recognizer.config import RecognizerConfig
from stroke_recognizer.gestures import GestureRecord


@pytest.fixture
def config():
    return RecognizerConfig(points_per_gesture=8, standard_ratio=100.0)


@pytest.fixture
def make_record():
    """Build a record whose every point is the same offset from the origin."""
    def _make_record(name, offset=(0.0, 0.0), n=4):
        return GestureRecord(name, np.tile(np.array(offset, dtype=float), (n, 1)))
    return _make_record
