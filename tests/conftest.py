"""Shared fixtures: hand-built PID log records."""

import pytest

from helpers import pack_record


@pytest.fixture
def two_record_log():
    """Two records, all terms zero except roll P = 250 in the second."""
    roll_p = [250.0] + [0.0] * 11
    return pack_record(0, 0) + pack_record(1, 10, roll_p)


@pytest.fixture
def known_terms():
    """Twelve values exactly representable in float32."""
    return [1.5, -2.25, 0.125, 100.0,
            -0.5, 3.75, 42.0, -7.0,
            0.0, 65536.0, -0.0625, 12.5]
