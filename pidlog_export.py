#!/usr/bin/env python3
"""
PID Log Export - derived tuning metrics to CSV.

Raw P/I/D/FF terms are logged in internal units; multiplying by SCALE gives
the physical gain. For each axis the export carries the four scaled terms
plus P, I and D with the feed-forward term subtracted ("NoFF"):

    P*k  I*k  D*k  FF*k  (P-FF)*k  (I-FF)*k  (D-FF)*k      k = 0.004

Arithmetic is done in float32, the width the values were logged at.
"""

import csv
import logging

import numpy as np

log = logging.getLogger("pidlog.export")

# ─── Constants ────────────────────────────────────────────────────────────────

SCALE = np.float32(0.004)

AXIS_NAMES = ["Roll", "Pitch", "Yaw"]

# Raw record fields per axis, in P, I, D, FF order
AXIS_FIELDS = {
    "Roll": ("p_roll", "i_roll", "d_roll", "ff_roll"),
    "Pitch": ("p_pitch", "i_pitch", "d_pitch", "ff_pitch"),
    "Yaw": ("p_yaw", "i_yaw", "d_yaw", "ff_yaw"),
}

_AXIS_COLUMNS = ["P_{}", "I_{}", "D_{}", "FF_{}", "P_{}_NoFF", "I_{}_NoFF", "D_{}_NoFF"]

CSV_COLUMNS = ["LoopIteration", "Time"] + [
    col.format(axis) for axis in AXIS_NAMES for col in _AXIS_COLUMNS
]


# ─── Derivation ───────────────────────────────────────────────────────────────

def derive_axis_terms(p, i, d, ff):
    """Scale one axis' P/I/D/FF terms and derive the feed-forward-free terms.

    Accepts scalars or numpy arrays. Returns a 7-tuple:
    (P, I, D, FF, P_NoFF, I_NoFF, D_NoFF), all float32.
    """
    p, i, d, ff = (np.float32(v) for v in (p, i, d, ff))
    with np.errstate(over="ignore", invalid="ignore"):
        return (
            p * SCALE, i * SCALE, d * SCALE, ff * SCALE,
            (p - ff) * SCALE, (i - ff) * SCALE, (d - ff) * SCALE,
        )


def derive_row(record):
    """Build the 23 export values for one PidRecord."""
    row = [record.loop_iteration, record.time]
    for axis in AXIS_NAMES:
        row.extend(derive_axis_terms(*(getattr(record, f) for f in AXIS_FIELDS[axis])))
    return row


def format_value(value):
    """Shortest round-tripping decimal text, no exponent.

    Counters stay plain integers; float32 values always keep a fractional
    digit (1.0, 0.4, 0.0). NaN is written as "NaN", infinities as "inf"
    and "-inf".
    """
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(np.float32(value), trim="0")


def format_row(record):
    return [format_value(v) for v in derive_row(record)]


# ─── CSV Writer ───────────────────────────────────────────────────────────────

def write_pid_csv(records, filepath):
    """Write the header plus one derived row per record.

    The destination is created or truncated. OSError from open or write
    propagates; rows already written stay on disk. Returns the row count.
    """
    n_rows = 0
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        for record in records:
            writer.writerow(format_row(record))
            n_rows += 1
    log.info(f"Wrote {n_rows:,} rows x {len(CSV_COLUMNS)} columns to {filepath}")
    return n_rows
