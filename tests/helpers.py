"""Builders for hand-encoded PID log records."""

import struct

RECORD_FMT = "<II12f"


def pack_record(loop_iteration, time, terms=None):
    """Encode one 56-byte record; terms is 12 floats in roll/pitch/yaw P,I,D,FF order."""
    if terms is None:
        terms = [0.0] * 12
    return struct.pack(RECORD_FMT, loop_iteration, time, *terms)
