#!/usr/bin/env python3
"""
PID Log Analyzer
────────────────
Decodes a binary PID loop log and writes the scaled P/I/D/FF terms per axis
to CSV plus a scatter chart of the raw P terms over time.

Outputs land in the current directory, named after the input file:

    python pidlog_analyzer.py -i logs/flight_012.bin
    CSV file generated: flight_012.csv
    Graphics file generated: flight_012.png

Requires: pidlog_decoder.py, pidlog_export.py, pidlog_plot.py
"""

import argparse
import logging
import os
import sys

from pidlog_decoder import read_pid_log
from pidlog_export import write_pid_csv
from pidlog_plot import create_pid_chart

log = logging.getLogger("pidlog")

VERSION = "1.0.0"


def output_names(logfile):
    """CSV and PNG names for a log: input file name minus its extension."""
    base = os.path.splitext(os.path.basename(logfile))[0]
    return f"{base}.csv", f"{base}.png"


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="pidlog-analyzer",
        description="Analyze PID loop logs and output PID values to CSV and graphics")
    parser.add_argument("-i", "--input", required=True, metavar="PATH",
                        help="Path to the binary PID log file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show decode and export details on stderr")
    parser.add_argument("--version", action="version",
                        version=f"PID Log Analyzer {VERSION}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="  %(message)s")

    logfile = args.input
    if not os.path.isfile(logfile):
        log.error(f"ERROR: File not found: {logfile}")
        sys.exit(1)

    csv_name, png_name = output_names(logfile)

    try:
        records = read_pid_log(logfile)
    except OSError as e:
        log.error(f"ERROR: Cannot read {logfile}: {e}")
        sys.exit(1)

    if not records:
        log.warning(f"No complete records in {logfile}")

    try:
        write_pid_csv(records, csv_name)
    except OSError as e:
        log.error(f"ERROR: Cannot write {csv_name}: {e}")
        sys.exit(1)
    print(f"CSV file generated: {csv_name}")

    try:
        create_pid_chart(records, png_name)
    except Exception as e:
        log.error(f"ERROR: Chart rendering failed: {e}")
        sys.exit(1)
    print(f"Graphics file generated: {png_name}")

    return 0


if __name__ == "__main__":
    main()
