"""
Track tables.

A track table holds one row per fix (observation) of a tracked individual:
- id:   individual identifier (repeated across rows)
- time: timestamp of the fix
- x, y: coordinates (cartesian, or longitude/latitude)
- z:    optional third coordinate (3D tables only)

The projection is a single attribute of the whole table and can only be
changed through set_projection(), which reprojects x/y at the same time.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .coords import Projection, parse_projection, reproject_xy
from .errors import (
    IncompleteCoordinates,
    InvalidProjectionSpec,
    LengthMismatch,
    NotATrackTable,
)

logger = logging.getLogger(__name__)


class TableKind(Enum):
    """
    Storage backends a track table can be built on.

    PANDAS (canonical): pandas.DataFrame
    NUMPY: numpy structured array, one field per column
    """
    PANDAS = "pandas"
    NUMPY = "numpy"


REQUIRED_COLUMNS = ("id", "time", "x", "y")


def _kind_of(data: Any) -> TableKind:
    if isinstance(data, pd.DataFrame):
        return TableKind.PANDAS
    if isinstance(data, np.ndarray) and data.dtype.names is not None:
        return TableKind.NUMPY
    raise NotATrackTable(
        f"Unsupported table backend: {type(data).__name__}"
    )


def _frame_to_records(frame: pd.DataFrame) -> np.ndarray:
    return np.asarray(frame.to_records(index=False))


def _records_to_frame(records: np.ndarray) -> pd.DataFrame:
    return pd.DataFrame({name: records[name] for name in records.dtype.names})


def _is_time_like(values: pd.Series) -> bool:
    return (
        pd.api.types.is_numeric_dtype(values)
        or pd.api.types.is_datetime64_any_dtype(values)
        or pd.api.types.is_timedelta64_dtype(values)
    )


class TrackTable:
    """
    Table of tracking fixes with an attached projection.

    Args:
        data: pandas DataFrame or numpy structured array with at least the
              columns id, time, x, y
        proj: Projection (anything parse_projection() accepts)
    """

    def __init__(self, data: Union[pd.DataFrame, np.ndarray], proj: Any = None):
        kind = _kind_of(data)
        names = list(data.columns) if kind is TableKind.PANDAS else list(data.dtype.names)

        missing = [c for c in REQUIRED_COLUMNS if c not in names]
        if missing:
            raise NotATrackTable(f"Missing required columns: {missing}")

        self._data = data
        self._kind = kind
        self._proj = parse_projection(proj)

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        proj: Any = None,
        table_kind: Union[TableKind, str] = TableKind.PANDAS
    ) -> "TrackTable":
        """Wrap an existing DataFrame (copied) as a track table."""
        if not isinstance(frame, pd.DataFrame):
            raise NotATrackTable(f"Expected a DataFrame, got {type(frame).__name__}")
        table = cls(frame.reset_index(drop=True), proj)
        return as_table_kind(table, table_kind)

    @property
    def data(self) -> Union[pd.DataFrame, np.ndarray]:
        """Underlying table object of the current backend."""
        return self._data

    @property
    def table_kind(self) -> TableKind:
        return self._kind

    @property
    def proj(self) -> Projection:
        return self._proj

    @proj.setter
    def proj(self, value: Any) -> None:
        set_projection(self, value)

    @property
    def columns(self) -> List[str]:
        if self._kind is TableKind.PANDAS:
            return list(self._data.columns)
        return list(self._data.dtype.names)

    def column(self, name: str) -> np.ndarray:
        """Values of one column as a numpy array."""
        if name not in self.columns:
            raise KeyError(name)
        if self._kind is TableKind.PANDAS:
            return self._data[name].to_numpy()
        return np.asarray(self._data[name])

    def to_frame(self) -> pd.DataFrame:
        """Copy of the rows as a DataFrame, whatever the backend."""
        if self._kind is TableKind.PANDAS:
            return self._data.copy()
        return _records_to_frame(self._data)

    def copy(self) -> "TrackTable":
        return TrackTable(self._data.copy(), self._proj)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return describe(self)


def is_track(obj: Any) -> bool:
    """True if obj is a track table."""
    return isinstance(obj, TrackTable)


def _check_track(obj: Any) -> None:
    if not is_track(obj):
        raise NotATrackTable(f"This is not a track table ({type(obj).__name__}).")


def track_df(
    id: Sequence,
    time: Sequence,
    x: Sequence,
    y: Sequence,
    z: Optional[Sequence] = None,
    proj: Any = None,
    table_kind: Union[TableKind, str] = TableKind.PANDAS,
    time_format: Optional[str] = None,
    **extra: Sequence
) -> TrackTable:
    """
    Build a track table from column values.

    Args:
        id: Identifier of the tracked individual for each fix
        time: Timestamp of each fix. Strings are parsed with pandas.to_datetime
        x, y: Coordinates of each fix
        z: Optional third coordinate
        proj: Projection of the coordinates (None = unprojected)
        table_kind: Backend to build the table on
        time_format: strftime format passed to pandas.to_datetime
        **extra: Additional columns, kept as is

    Returns:
        TrackTable
    """
    columns: Dict[str, Any] = {"id": id, "time": time, "x": x, "y": y}
    if z is not None:
        columns["z"] = z
    columns.update(extra)

    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        raise LengthMismatch(f"All columns must have the same length: {lengths}")

    times = pd.Series(time)
    if time_format is not None or not _is_time_like(times):
        times = pd.to_datetime(times, format=time_format)
    columns["time"] = times.to_numpy()

    frame = pd.DataFrame(columns)
    return TrackTable.from_frame(frame, proj=proj, table_kind=table_kind)


def as_table_kind(track: TrackTable, kind: Union[TableKind, str]) -> TrackTable:
    """
    Return the track table on the requested backend.

    The projection, rows and column order are preserved. The input is returned
    unchanged if it is already of that kind.
    """
    _check_track(track)
    kind = TableKind(kind)

    if track.table_kind is kind:
        return track

    logger.debug(f"Converting track table: {track.table_kind.value} -> {kind.value}")
    frame = track.to_frame()
    data = frame if kind is TableKind.PANDAS else _frame_to_records(frame)
    return TrackTable(data, track.proj)


# ============== Predicates ==============

def is_geo(track: TrackTable) -> bool:
    """True if the table's projection is a defined coordinate system."""
    _check_track(track)
    return track.proj.is_defined


def n_dims(track: TrackTable) -> int:
    """Number of spatial dimensions: 3 if the table has a z column, else 2."""
    _check_track(track)
    return 3 if "z" in track.columns else 2


def n_tracks(track: TrackTable) -> int:
    """Number of distinct values in the id column (missing ids count as one)."""
    _check_track(track)
    return int(pd.Series(track.column("id")).nunique(dropna=False))


# ============== Projection ==============

def projection(track: TrackTable) -> Projection:
    """Current projection of a track table."""
    _check_track(track)
    return track.proj


def set_projection(track: TrackTable, value: Any) -> TrackTable:
    """
    Change the projection of a track table in place.

    If the current projection is defined, x and y are transformed into the
    new projection. If it is unprojected there is nothing to transform from,
    and only the attribute changes. Other columns, the row count and the row
    order are never touched.

    Args:
        track: Track table (modified in place)
        value: New projection: a string such as "+proj=longlat", a
               Projection, a pyproj CRS, or None for unprojected

    Returns:
        The same track table

    Raises:
        InvalidProjectionSpec: value cannot be parsed, or a defined projection
            would be replaced by an unprojected one
        IncompleteCoordinates: some x or y values are missing
    """
    _check_track(track)
    new_proj = parse_projection(value)

    x = track.column("x")
    y = track.column("y")
    n_missing = int(np.count_nonzero(pd.isna(x) | pd.isna(y)))
    if n_missing:
        raise IncompleteCoordinates(
            f"The projection cannot be modified when missing coordinates are "
            f"present ({n_missing} of {len(track)} rows)."
        )

    if track.proj.is_defined:
        if not new_proj.is_defined:
            raise InvalidProjectionSpec(
                f"Cannot reproject coordinates from {track.proj} to an "
                f"unprojected system"
            )
        new_x, new_y = reproject_xy(x, y, track.proj, new_proj)
        _assign_xy(track, new_x, new_y)
        logger.info(f"Reprojected {len(track)} fixes: {track.proj} -> {new_proj}")

    track._proj = new_proj
    return track


def project(track: TrackTable, value: Any) -> TrackTable:
    """
    Functional form of set_projection().

    Returns a reprojected copy; the input table is left unchanged.
    """
    _check_track(track)
    return set_projection(track.copy(), value)


def _assign_xy(track: TrackTable, new_x: np.ndarray, new_y: np.ndarray) -> None:
    if track.table_kind is TableKind.PANDAS:
        track._data["x"] = new_x
        track._data["y"] = new_y
        return

    # Structured array fields keep their dtype, so widen x/y to float first
    old = track._data
    dtype = [
        (name, np.float64 if name in ("x", "y") else old.dtype[name])
        for name in old.dtype.names
    ]
    data = np.empty(len(old), dtype=dtype)
    for name in old.dtype.names:
        data[name] = old[name]
    data["x"] = new_x
    data["y"] = new_y
    track._data = data


# ============== Summary ==============

def describe(track: TrackTable) -> str:
    """
    Short text summary of a track table.

    Example:
        Track table [6 observations]
        Number of tracks:  3
        Dimensions:  2D
        Geographic:  True
        Projection:  +proj=longlat
        Table class:  pandas
    """
    _check_track(track)
    lines = [
        f"Track table [{len(track)} observations]",
        f"Number of tracks:  {n_tracks(track)}",
        f"Dimensions:  {n_dims(track)}D",
        f"Geographic:  {is_geo(track)}",
        f"Projection:  {track.proj}",
        f"Table class:  {track.table_kind.value}",
    ]
    return "\n".join(lines)
