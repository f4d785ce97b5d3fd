from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


@pytest.fixture
def sample_frame() -> pd.DataFrame:
    return pd.DataFrame({"category": ["A", "B", "A"], "value": [1.0, 2.0, 3.0]})


@pytest.fixture
def csv_with_gap(tmp_path: Path) -> Path:
    path = tmp_path / "data.csv"
    path.write_text("category,value\nA,1.0\nA,\nA,3.0\n", encoding="utf-8")
    return path
