from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np
import pandas as pd

from .config import AnalysisConfig, make_config
from .data_prep import drop_incomplete_rows, require_columns
from .errors import StatisticsError

logger = logging.getLogger(__name__)

STATS_COLUMNS = ["category", "avg_value", "std_value", "count"]


@dataclass(frozen=True, eq=False)
class AnalysisResults:
    high_variance_categories: pd.DataFrame
    total_samples: int
    anomaly_rate: float

    @property
    def flagged_count(self) -> int:
        return len(self.high_variance_categories)

    def summary_lines(self) -> List[str]:
        if np.isnan(self.anomaly_rate):
            rate = "n/a"
        else:
            rate = f"{round(self.anomaly_rate * 100, 2):.2f}%"
        return [
            f"Total samples processed: {self.total_samples}",
            f"Anomaly rate: {rate}",
        ]


def per_category_metrics(
    data: pd.DataFrame,
    on_dropped: Optional[Callable[[int], None]] = None,
) -> pd.DataFrame:
    """
    Validate `category`/`value`, drop incomplete rows, then compute per category:
      avg_value (mean), std_value (sample std, ddof=1; NaN for a single row), count.
    One row per category, sorted by category.
    """
    require_columns(data)
    clean = drop_incomplete_rows(data, on_dropped=on_dropped)

    try:
        stats = clean.groupby("category", sort=True).agg(
            avg_value=("value", "mean"),
            std_value=("value", "std"),
            count=("value", "size"),
        ).reset_index()
    except Exception as e:
        raise StatisticsError(f"Failed to compute statistics: {e}") from e

    stats["avg_value"] = stats["avg_value"].astype(float)
    stats["std_value"] = stats["std_value"].astype(float)
    stats["count"] = stats["count"].astype(int)
    logger.debug("Aggregated %d rows into %d categories", len(clean), len(stats))
    return stats[STATS_COLUMNS]


def flag_high_variability(
    aggregated: pd.DataFrame,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResults:
    """
    Flag categories whose std is above threshold * average (a relative test,
    so zero or negative averages are not special-cased). NaN std never flags.

    anomaly_rate is flagged / all categories, NaN when `aggregated` is empty.
    """
    config = config or make_config()
    require_columns(aggregated, STATS_COLUMNS)

    t = config.variability_threshold
    mask = aggregated["std_value"] > t * aggregated["avg_value"]
    high_var = aggregated.loc[mask].reset_index(drop=True)

    total_samples = int(aggregated["count"].sum())
    n_rows = len(aggregated)
    anomaly_rate = len(high_var) / n_rows if n_rows else float("nan")

    logger.info("Flagged %d of %d categories (threshold=%s)", len(high_var), n_rows, t)
    return AnalysisResults(high_var, total_samples, anomaly_rate)
