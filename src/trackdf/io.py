"""
Data I/O utilities.

Builds track tables from CSV or parquet files. Column names are matched
against common tracker/Movebank conventions, and renamed to the canonical
id, time, x, y[, z].
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from .track import TableKind, TrackTable

logger = logging.getLogger(__name__)

COLUMN_CANDIDATES = {
    "id": ["id", "individual-local-identifier", "tag-local-identifier", "track_id"],
    "time": ["time", "timestamp", "t", "t_seconds"],
    "x": ["x", "location-long", "longitude", "lon"],
    "y": ["y", "location-lat", "latitude", "lat"],
    "z": ["z", "height-above-ellipsoid", "altitude", "height"],
}


def _find_column(df: pd.DataFrame, candidates: List[str]) -> Optional[str]:
    """Find first matching column name from candidates."""
    for col in candidates:
        if col in df.columns:
            return col
    return None


def load_tracks(
    path: Union[str, Path],
    proj: Any = None,
    table_kind: Union[TableKind, str] = TableKind.PANDAS,
    id_col: Optional[str] = None,
    time_col: Optional[str] = None,
    x_col: Optional[str] = None,
    y_col: Optional[str] = None,
    z_col: Optional[str] = None
) -> TrackTable:
    """
    Load a track table from a CSV or parquet file.

    Args:
        path: Path to data file
        proj: Projection of the coordinates in the file (None = unprojected)
        table_kind: Backend of the returned table
        id_col, time_col, x_col, y_col, z_col: Explicit column names. When
            omitted, the first matching name from COLUMN_CANDIDATES is used.

    Returns:
        TrackTable with canonical column names. Other columns are kept.
    """
    path = Path(path)

    if path.suffix == '.parquet':
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(path)

    logger.info(f"Loaded {len(df)} rows from {path}")

    explicit = {"id": id_col, "time": time_col, "x": x_col, "y": y_col, "z": z_col}
    found = {
        name: explicit[name] or _find_column(df, candidates)
        for name, candidates in COLUMN_CANDIDATES.items()
    }

    for name in ("x", "y"):
        if found[name] is None or found[name] not in df.columns:
            raise ValueError(
                f"Could not find the {name} column in {df.columns.tolist()}"
            )

    rename = {src: dst for dst, src in found.items() if src is not None and src != dst}
    df = df.rename(columns=rename)

    if found["id"] is None:
        logger.warning(f"No id column in {path.name}, treating it as a single track")
        df["id"] = path.stem

    if found["time"] is None:
        logger.warning(f"No time column in {path.name}, using row order")
        df["time"] = range(len(df))
    elif not (
        pd.api.types.is_numeric_dtype(df["time"])
        or pd.api.types.is_datetime64_any_dtype(df["time"])
    ):
        df["time"] = pd.to_datetime(df["time"])

    return TrackTable.from_frame(df, proj=proj, table_kind=table_kind)
