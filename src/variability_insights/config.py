from __future__ import annotations

import math
import os
from dataclasses import dataclass
from numbers import Real
from typing import Union

from .errors import InvalidConfigError

DEFAULT_VARIABILITY_THRESHOLD = 2.0
DEFAULT_OUTPUT_PATH = "analysis_results.png"


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Settings for one analysis run.

      variability_threshold: multiplier on a category's average value; a
        category is flagged when its std exceeds threshold * average. Must be > 0.
      output_path: where the bar chart is written (not checked until render).
    """
    variability_threshold: float = DEFAULT_VARIABILITY_THRESHOLD
    output_path: str = DEFAULT_OUTPUT_PATH

    def __post_init__(self) -> None:
        t = self.variability_threshold
        # bool is a Real subclass; True/False are never meant as thresholds
        if isinstance(t, bool) or not isinstance(t, Real):
            raise InvalidConfigError(f"Threshold must be a number, got {t!r}")
        if math.isnan(t) or t <= 0:
            raise InvalidConfigError(f"Threshold must be positive, got {t!r}")
        object.__setattr__(self, "variability_threshold", float(t))
        object.__setattr__(self, "output_path", os.fspath(self.output_path))


def make_config(
    variability_threshold: float = DEFAULT_VARIABILITY_THRESHOLD,
    output_path: Union[str, "os.PathLike[str]"] = DEFAULT_OUTPUT_PATH,
) -> AnalysisConfig:
    return AnalysisConfig(variability_threshold=variability_threshold, output_path=output_path)
