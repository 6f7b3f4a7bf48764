"""
PID chart tests: X-range rule, fixed image size, empty logs.
"""

import matplotlib.image as mpimg
import pytest

from pidlog_decoder import PidRecord, decode_pid_log
from pidlog_plot import CHART_SIZE_PX, chart_time_limit, create_pid_chart

from helpers import pack_record


def record_at(time, p=0.0):
    return PidRecord(0, time, p, 0.0, 0.0, 0.0, p, 0.0, 0.0, 0.0, p, 0.0, 0.0, 0.0)


class TestTimeLimit:

    def test_empty_log(self):
        assert chart_time_limit([]) == 1

    def test_zero_time(self):
        assert chart_time_limit([record_at(0)]) == 1

    def test_latest_time(self):
        assert chart_time_limit([record_at(0), record_at(10), record_at(2500)]) == 2500

    def test_uses_largest_time_in_log(self):
        assert chart_time_limit([record_at(900), record_at(300)]) == 900


class TestCreateChart:

    def test_fixed_size_png(self, tmp_path, two_record_log):
        path = tmp_path / "flight.png"
        create_pid_chart(decode_pid_log(two_record_log), str(path))
        image = mpimg.imread(str(path))
        width, height = CHART_SIZE_PX
        assert image.shape[:2] == (height, width)

    def test_empty_log_renders(self, tmp_path):
        path = tmp_path / "empty.png"
        create_pid_chart([], str(path))
        assert path.stat().st_size > 0

    def test_out_of_range_values(self, tmp_path):
        buf = b"".join(pack_record(n, n * 5, [400.0 * (-1) ** n] * 12) for n in range(50))
        path = tmp_path / "wild.png"
        create_pid_chart(decode_pid_log(buf), str(path))
        assert path.exists()

    def test_unwritable_destination_raises(self, tmp_path):
        with pytest.raises(OSError):
            create_pid_chart([record_at(1)], str(tmp_path / "missing_dir" / "out.png"))
