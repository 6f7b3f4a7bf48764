#!/usr/bin/env python3
"""
PID Log Decoder - fixed-layout binary PID loop logs.

Each record is a flat 56-byte little-endian frame written by the flight
controller's PID loop:

    loopIteration  u32
    time           u32   (ms since log start)
    P/I/D/FF roll  4 x f32
    P/I/D/FF pitch 4 x f32
    P/I/D/FF yaw   4 x f32

No header, no magic, no trailer. Decoding stops at the first record that
does not fit in the remaining bytes; a truncated tail is dropped silently.

Usage:
    from pidlog_decoder import read_pid_log

    records = read_pid_log("flight.bin")
    print(records[0].p_roll)
"""

import logging
import struct
from collections import namedtuple

log = logging.getLogger("pidlog.decoder")

# ─── Record Layout ───────────────────────────────────────────────────────────

FIELD_NAMES = (
    "loop_iteration", "time",
    "p_roll", "i_roll", "d_roll", "ff_roll",
    "p_pitch", "i_pitch", "d_pitch", "ff_pitch",
    "p_yaw", "i_yaw", "d_yaw", "ff_yaw",
)

PidRecord = namedtuple("PidRecord", FIELD_NAMES)

_U32 = struct.Struct("<I")
_F32 = struct.Struct("<f")

# One reader per field, in file order
RECORD_LAYOUT = (_U32, _U32) + (_F32,) * 12

RECORD_SIZE = sum(fmt.size for fmt in RECORD_LAYOUT)  # 56


class PidLogDecoder:
    """Cursor-based decoder over an in-memory PID log buffer."""

    def __init__(self, buf):
        self.buf = bytes(buf)
        self.pos = 0
        self.end = len(self.buf)
        self.stats = {"records": 0, "trailing_bytes": 0}

    # ─── Binary Primitives ───────────────────────────────────────────────────

    def _read_field(self, fmt):
        """Read one field at the cursor, or None if it does not fit."""
        if self.pos + fmt.size > self.end:
            return None
        value = fmt.unpack_from(self.buf, self.pos)[0]
        self.pos += fmt.size
        return value

    # ─── Record Decoding ─────────────────────────────────────────────────────

    def decode_record(self):
        """Decode the record at the cursor.

        Returns a PidRecord, or None when the remaining bytes hold only part
        of a record. On None the cursor is rewound to the start of the
        partial record.
        """
        start = self.pos
        values = []
        for fmt in RECORD_LAYOUT:
            value = self._read_field(fmt)
            if value is None:
                self.pos = start
                return None
            values.append(value)
        self.stats["records"] += 1
        return PidRecord(*values)

    def iter_records(self):
        while True:
            record = self.decode_record()
            if record is None:
                break
            yield record
        self.stats["trailing_bytes"] = self.end - self.pos

    def decode(self):
        """Decode every complete record. Returns a list in file order."""
        records = list(self.iter_records())
        if self.stats["trailing_bytes"]:
            log.info(f"Ignored {self.stats['trailing_bytes']} trailing bytes "
                     f"(partial record)")
        return records


def decode_pid_log(buf):
    """Decode a PID log held in memory."""
    return PidLogDecoder(buf).decode()


def read_pid_log(filepath):
    """Read and decode a PID log file.

    Failing to open or read the file raises OSError; nothing inside the file
    is treated as an error.
    """
    with open(filepath, "rb") as f:
        buf = f.read()
    decoder = PidLogDecoder(buf)
    records = decoder.decode()
    log.info(f"Decoded {decoder.stats['records']:,} records "
             f"({decoder.end:,} bytes) from {filepath}")
    return records
