from .config import AnalysisConfig, make_config
from .data_prep import load_data
from .errors import (
    AnalysisError,
    DataNotFoundError,
    DataReadError,
    InvalidConfigError,
    MissingColumnsError,
    RenderError,
    StatisticsError,
)
from .metrics import AnalysisResults, flag_high_variability, per_category_metrics
from .pipeline import run_pipeline
from .viz import ChartHandle, plot_high_variability

__all__ = [
    "AnalysisConfig",
    "make_config",
    "load_data",
    "per_category_metrics",
    "flag_high_variability",
    "plot_high_variability",
    "run_pipeline",
    "AnalysisResults",
    "ChartHandle",
    "AnalysisError",
    "InvalidConfigError",
    "DataNotFoundError",
    "DataReadError",
    "MissingColumnsError",
    "StatisticsError",
    "RenderError",
]
