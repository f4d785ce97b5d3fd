import logging
import os
from typing import Callable, Optional, Sequence

import pandas as pd

from .errors import DataNotFoundError, DataReadError, MissingColumnsError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["category", "value"]


def load_data(path: str, sep: str = ",") -> pd.DataFrame:
    """
    Read a delimited-text file into a DataFrame.

    Raises DataNotFoundError when `path` is not an existing file and
    DataReadError (chained to the parser/IO error) when it cannot be parsed.
    """
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise DataNotFoundError(f"File not found: {path}")

    try:
        df = pd.read_csv(path, sep=sep)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise DataReadError(f"Failed to read data: {e}") from e

    logger.debug("Loaded %s: %d rows x %d columns", path, df.shape[0], df.shape[1])
    return df


def require_columns(df: pd.DataFrame, required: Sequence[str] = REQUIRED_COLUMNS) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing, found=[str(c) for c in df.columns])


def drop_incomplete_rows(
    df: pd.DataFrame,
    on_dropped: Optional[Callable[[int], None]] = None,
) -> pd.DataFrame:
    """
    Drop every row with a null in any column. The number removed is logged
    and, if given, passed to `on_dropped`.
    """
    n_before = len(df)
    out = df.dropna().copy()
    n_removed = n_before - len(out)
    logger.info("Removed %d rows with missing values", n_removed)
    if on_dropped is not None:
        on_dropped(n_removed)
    return out
