from __future__ import annotations
import logging
import os
from typing import NamedTuple, Optional
import matplotlib.pyplot as plt

from .config import AnalysisConfig, make_config
from .errors import RenderError
from .metrics import AnalysisResults

logger = logging.getLogger(__name__)

TITLE = "Categories with High Variability"


class ChartHandle(NamedTuple):
    figure: plt.Figure
    axes: plt.Axes
    path: str


def _ensure_dir(p: Optional[str]) -> None:
    if p:
        d = os.path.dirname(p)
        if d and not os.path.exists(d):
            os.makedirs(d, exist_ok=True)


def plot_high_variability(
    results: AnalysisResults,
    config: Optional[AnalysisConfig] = None,
    show: bool = False,
) -> ChartHandle:
    """
    Bar chart of std_value per flagged category, saved to config.output_path
    (overwritten if present; format follows the extension).
    """
    config = config or make_config()
    high_var = results.high_variance_categories
    out_path = config.output_path

    fig, ax = plt.subplots(figsize=(8, 5))
    try:
        ax.bar(high_var["category"].astype(str).tolist(), high_var["std_value"].to_numpy())
        ax.set_title(TITLE)
        ax.set_xlabel("Category")
        ax.set_ylabel("Standard Deviation")
        ax.tick_params(axis="x", labelrotation=45)
        fig.tight_layout()

        _ensure_dir(out_path)
        fig.savefig(out_path, dpi=150)
    except (OSError, ValueError, TypeError, KeyError) as e:
        plt.close(fig)
        raise RenderError(f"Failed to render chart to {out_path}: {e}") from e

    logger.info("Saved chart with %d categories to %s", len(high_var), out_path)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return ChartHandle(fig, ax, out_path)
