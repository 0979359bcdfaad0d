from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from ecomimic_site.plotting.helpers import fixed_axis_ticks, percent_of_scale

# Hourly water-quality sample used by the hero chart: (time, temp C, pH, DO mg/L)
WATER_SERIES: tuple[tuple[str, float, float, float], ...] = (
    ("08:00", 25.1, 7.2, 7.8),
    ("10:00", 25.3, 7.3, 8.1),
    ("12:00", 25.5, 7.2, 8.0),
    ("14:00", 25.6, 7.1, 8.2),
    ("16:00", 25.4, 7.2, 8.4),
    ("18:00", 25.2, 7.2, 8.3),
)
WATER_COLUMNS = ("t", "temp", "ph", "do")

TEMP_DOMAIN: tuple[float, float] = (24.8, 25.8)
DO_DOMAIN: tuple[float, float] = (7.0, 8.6)

TEMP_COLOR = "#38bdf8"
DO_COLOR = "#818cf8"
AXIS_COLOR = "#9ca3af"


@dataclass(frozen=True)
class AxisSpec:
    title: str
    domain: tuple[float, float]
    ticks: tuple[float, ...]
    side: str = "left"


@dataclass(frozen=True)
class SeriesTrace:
    label: str
    column: str
    x: tuple[str, ...]
    y: tuple[float, ...]
    axis: str
    color: str


@dataclass
class WaterQualityPlotData:
    traces: list[SeriesTrace] = field(default_factory=list)
    left_axis: AxisSpec | None = None
    right_axis: AxisSpec | None = None
    caption: str = ""


@dataclass(frozen=True)
class ConsoleReading:
    label: str
    value: float
    unit: str
    scale: tuple[float, float]

    @property
    def display(self) -> str:
        return f"{self.value:g} {self.unit}".strip()

    @property
    def percent(self) -> int:
        return percent_of_scale(self.value, *self.scale)


CONSOLE_READINGS: tuple[ConsoleReading, ...] = (
    ConsoleReading("溶解氧", 8.3, "mg/L", (0.0, 10.0)),
    ConsoleReading("温度", 25.4, "℃", (20.0, 30.0)),
    ConsoleReading("pH 值", 7.2, "", (0.0, 10.0)),
)


def water_quality_frame() -> pd.DataFrame:
    """Return a fresh copy of the mock series; callers may not mutate the source."""
    df = pd.DataFrame(list(WATER_SERIES), columns=list(WATER_COLUMNS))
    df["t"] = pd.Categorical(df["t"], categories=[row[0] for row in WATER_SERIES], ordered=True)
    return df


def prepare_water_quality_plot() -> WaterQualityPlotData:
    df = water_quality_frame()
    x = tuple(str(v) for v in df["t"])
    data = WaterQualityPlotData(
        left_axis=AxisSpec("温度 (℃)", TEMP_DOMAIN, tuple(fixed_axis_ticks(TEMP_DOMAIN, 6)), side="left"),
        right_axis=AxisSpec("溶解氧 (mg/L)", DO_DOMAIN, tuple(fixed_axis_ticks(DO_DOMAIN, 5)), side="right"),
        caption="实时水质：温度 / 溶解氧",
    )
    data.traces.append(
        SeriesTrace("温度", "temp", x, tuple(float(v) for v in df["temp"]), axis="left", color=TEMP_COLOR)
    )
    data.traces.append(
        SeriesTrace("溶解氧", "do", x, tuple(float(v) for v in df["do"]), axis="right", color=DO_COLOR)
    )
    return data
