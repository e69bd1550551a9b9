from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext

import numpy as np
import pandas as pd

from config import RECENT_READINGS_LIMIT
from readings import SoilReading

SERIES_COLUMNS = ["index", "timestamp", "crop", "nitrogen", "ph", "moisture"]


@dataclass(frozen=True)
class SeriesPoint:
    index: int
    timestamp: datetime
    nitrogen: float
    ph: float
    moisture: float


@dataclass(frozen=True)
class Summary:
    latest: SoilReading | None
    average_nitrogen: float
    average_ph: float
    average_moisture: float
    series: tuple[SeriesPoint, ...]

    @property
    def has_data(self) -> bool:
        return self.latest is not None

    @property
    def has_trend(self) -> bool:
        # a single point draws no line
        return len(self.series) > 1

    def rounded_averages(self) -> dict:
        return {
            "nitrogen": round_half_away(self.average_nitrogen),
            "ph": round_half_away(self.average_ph),
            "moisture": round_half_away(self.average_moisture),
        }


def round_half_away(value: float, digits: int = 1) -> float:
    if not np.isfinite(value):
        return value
    step = Decimal(1).scaleb(-digits)
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # enough digits for the integer part plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return float(exact.quantize(step, rounding=ROUND_HALF_UP))


def to_frame(log) -> pd.DataFrame:
    """Chronological (oldest first) frame of the log, 1-based `index` column."""
    rows = [
        {
            "index": i,
            "timestamp": r.timestamp.isoformat(),
            "crop": r.crop,
            "nitrogen": r.nitrogen,
            "ph": r.ph,
            "moisture": r.moisture,
        }
        for i, r in enumerate(reversed(log), start=1)
    ]
    return pd.DataFrame(rows, columns=SERIES_COLUMNS)


def summarize(log) -> Summary:
    if not log:
        return Summary(
            latest=None,
            average_nitrogen=np.nan,
            average_ph=np.nan,
            average_moisture=np.nan,
            series=(),
        )

    values = np.array([[r.nitrogen, r.ph, r.moisture] for r in log], dtype=float)
    avg_n, avg_ph, avg_m = values.mean(axis=0)
    series = tuple(
        SeriesPoint(i, r.timestamp, r.nitrogen, r.ph, r.moisture)
        for i, r in enumerate(reversed(log), start=1)
    )
    return Summary(
        latest=log[0],
        average_nitrogen=float(avg_n),
        average_ph=float(avg_ph),
        average_moisture=float(avg_m),
        series=series,
    )


def recent(log, limit: int = RECENT_READINGS_LIMIT) -> list[SoilReading]:
    return list(log[:limit])
