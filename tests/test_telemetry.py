import pytest

from ecomimic_site.core.telemetry import (
    CONSOLE_READINGS,
    DO_DOMAIN,
    TEMP_DOMAIN,
    WATER_SERIES,
    prepare_water_quality_plot,
    water_quality_frame,
)
from ecomimic_site.plotting.helpers import (
    choose_decimals_from_ticks,
    fixed_axis_ticks,
    percent_of_scale,
    tick_labels,
)


def test_series_is_six_chronological_points():
    times = [row[0] for row in WATER_SERIES]
    assert len(times) == 6
    assert times == sorted(times)


def test_frame_is_a_copy():
    df = water_quality_frame()
    df.loc[0, "temp"] = 99.0
    assert water_quality_frame().loc[0, "temp"] == 25.1
    assert WATER_SERIES[0][1] == 25.1


def test_frame_columns_and_order():
    df = water_quality_frame()
    assert list(df.columns) == ["t", "temp", "ph", "do"]
    assert list(df["t"].astype(str)) == ["08:00", "10:00", "12:00", "14:00", "16:00", "18:00"]


def test_axis_domains_are_fixed():
    data = prepare_water_quality_plot()
    assert data.left_axis.domain == TEMP_DOMAIN == (24.8, 25.8)
    assert data.right_axis.domain == DO_DOMAIN == (7.0, 8.6)
    assert data.left_axis.ticks[0] == 24.8 and data.left_axis.ticks[-1] == 25.8
    assert data.right_axis.ticks[0] == 7.0 and data.right_axis.ticks[-1] == 8.6


def test_traces_follow_series():
    data = prepare_water_quality_plot()
    temp, oxygen = data.traces
    assert temp.axis == "left" and oxygen.axis == "right"
    assert temp.y == (25.1, 25.3, 25.5, 25.6, 25.4, 25.2)
    assert oxygen.y == (7.8, 8.1, 8.0, 8.2, 8.4, 8.3)
    assert temp.x == oxygen.x


def test_series_sits_inside_domains():
    for _t, temp, _ph, oxygen in WATER_SERIES:
        assert TEMP_DOMAIN[0] <= temp <= TEMP_DOMAIN[1]
        assert DO_DOMAIN[0] <= oxygen <= DO_DOMAIN[1]


def test_console_readings():
    by_label = {r.label: r for r in CONSOLE_READINGS}
    assert by_label["溶解氧"].percent == 83
    assert by_label["温度"].percent == 54
    assert by_label["pH 值"].percent == 72
    assert by_label["溶解氧"].display == "8.3 mg/L"
    assert by_label["pH 值"].display == "7.2"


def test_fixed_axis_ticks():
    assert fixed_axis_ticks((24.8, 25.8), 6) == [24.8, 25.0, 25.2, 25.4, 25.6, 25.8]
    assert fixed_axis_ticks((7.0, 8.6), 5) == [7.0, 7.4, 7.8, 8.2, 8.6]
    with pytest.raises(ValueError):
        fixed_axis_ticks((1.0, 1.0))


def test_tick_labels_and_decimals():
    assert choose_decimals_from_ticks([1.0]) == 0
    assert choose_decimals_from_ticks([0, 10, 20]) == 0
    assert choose_decimals_from_ticks([7.0, 7.4, 7.8]) == 1
    assert tick_labels([7.0, 7.4, 7.8], unit="mg/L") == ["7.0 mg/L", "7.4 mg/L", "7.8 mg/L"]


def test_percent_of_scale_clamps():
    assert percent_of_scale(-5, 0, 10) == 0
    assert percent_of_scale(50, 0, 10) == 100
    with pytest.raises(ValueError):
        percent_of_scale(1, 5, 5)
