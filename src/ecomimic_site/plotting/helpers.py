import numpy as np


def choose_decimals_from_ticks(ticks, max_decimals=4) -> int:
    ticks = np.asarray(ticks, dtype=float)
    ticks = np.unique(ticks[np.isfinite(ticks)])
    if ticks.size < 2:
        return 0

    diffs = np.diff(np.sort(ticks))
    diffs = diffs[diffs > 1e-12]
    if diffs.size == 0:
        return 0

    step = float(np.min(diffs))
    decimals = int(np.ceil(-np.log10(step) - 1e-9))
    decimals = max(0, min(decimals, max_decimals))
    return decimals


def fixed_axis_ticks(domain: tuple[float, float], count: int = 5) -> list[float]:
    """Evenly spaced tick values covering a fixed axis domain, endpoints included."""
    low, high = float(domain[0]), float(domain[1])
    if not (np.isfinite(low) and np.isfinite(high)) or high <= low:
        raise ValueError(f"Invalid axis domain: {domain!r}")
    count = max(2, int(count))
    ticks = np.linspace(low, high, count)
    decimals = choose_decimals_from_ticks(ticks)
    return [round(float(t), decimals) for t in ticks]


def tick_labels(ticks, unit: str = "") -> list[str]:
    decimals = choose_decimals_from_ticks(ticks)
    suffix = f" {unit}" if unit else ""
    return [f"{float(t):.{decimals}f}{suffix}" for t in ticks]


def percent_of_scale(value: float, low: float, high: float) -> int:
    """Position of ``value`` on ``[low, high]`` as a clamped 0-100 integer."""
    if high <= low:
        raise ValueError("Scale maximum must be greater than its minimum.")
    pct = 100.0 * (float(value) - low) / (high - low)
    return int(np.clip(np.round(pct), 0, 100))
