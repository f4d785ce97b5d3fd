"""Load → aggregate → flag → plot for one CSV file."""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from .config import AnalysisConfig, make_config
from .data_prep import load_data
from .metrics import AnalysisResults, flag_high_variability, per_category_metrics
from .viz import ChartHandle, plot_high_variability

logger = logging.getLogger(__name__)


class PipelineOutput(NamedTuple):
    results: AnalysisResults
    chart: ChartHandle


def run_pipeline(
    path: str,
    config: Optional[AnalysisConfig] = None,
    sep: str = ",",
) -> PipelineOutput:
    config = config or make_config()
    logger.info("Analyzing %s (threshold=%s)", path, config.variability_threshold)

    raw = load_data(path, sep=sep)
    stats = per_category_metrics(raw)
    results = flag_high_variability(stats, config)
    chart = plot_high_variability(results, config)
    return PipelineOutput(results, chart)
