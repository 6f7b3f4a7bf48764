#!/usr/bin/env python3
"""
PID Log Chart - raw P term per axis over time as a scatter plot.
"""

import logging

import numpy as np

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

log = logging.getLogger("pidlog.plot")

# ─── Constants ────────────────────────────────────────────────────────────────

AXIS_NAMES = ["Roll", "Pitch", "Yaw"]
AXIS_COLORS = ["red", "green", "blue"]
AXIS_P_FIELDS = ["p_roll", "p_pitch", "p_yaw"]

CHART_SIZE_PX = (1024, 768)
CHART_DPI = 100
Y_RANGE = (-180, 180)


def chart_time_limit(records):
    """Upper X bound: latest logged time, at least 1 ms. 1 for an empty log."""
    return max(max((r.time for r in records), default=0), 1)


def create_pid_chart(records, filepath):
    """Render the Roll/Pitch/Yaw P scatter chart to a PNG of CHART_SIZE_PX."""
    width, height = CHART_SIZE_PX
    fig, ax = plt.subplots(figsize=(width / CHART_DPI, height / CHART_DPI), dpi=CHART_DPI)
    try:
        fig.patch.set_facecolor("white")
        ax.set_facecolor("white")
        ax.set_title("Roll, Pitch, Yaw over Time", fontsize=16)

        times = np.array([r.time for r in records], dtype=np.float64)
        for name, field, color in zip(AXIS_NAMES, AXIS_P_FIELDS, AXIS_COLORS):
            values = np.array([getattr(r, field) for r in records], dtype=np.float64)
            ax.scatter(times, values, s=4, color=color, label=name)

        ax.set_xlim(0, chart_time_limit(records))
        ax.set_ylim(*Y_RANGE)
        ax.set_xlabel("Time (ms)")
        ax.set_ylabel("Angle (degrees)")
        ax.grid(True, alpha=0.4)
        ax.legend(loc="upper right", markerscale=2, edgecolor="black",
                  facecolor="white", framealpha=0.8)

        fig.savefig(filepath, format="png", dpi=CHART_DPI, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    log.info(f"Rendered {len(records):,} points per axis to {filepath}")
    return filepath
