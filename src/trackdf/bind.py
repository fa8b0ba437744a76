"""
Row binding of track tables.

bind_tracks() concatenates the rows of several track tables into one. It is
only legal when all inputs share the same projection and the same columns.
"""

import logging
from typing import Any, Dict, List

import pandas as pd

from .config import Config, DEFAULT_CONFIG
from .errors import EmptyInput, NotATrackTable, ProjectionMismatch, SchemaMismatch
from .track import TableKind, TrackTable, as_table_kind, is_track

logger = logging.getLogger(__name__)


def _flatten(items: Any, out: List[TrackTable]) -> List[TrackTable]:
    for item in items:
        if isinstance(item, (list, tuple)):
            _flatten(item, out)
        elif is_track(item):
            out.append(item)
        else:
            raise NotATrackTable(
                f"Cannot bind a {type(item).__name__}: this is not a track table."
            )
    return out


def _dtype_family(dtype) -> str:
    """Group dtypes that pandas can concatenate without losing meaning."""
    if isinstance(dtype, pd.CategoricalDtype):
        return "categorical"
    if pd.api.types.is_bool_dtype(dtype):
        return "boolean"
    if pd.api.types.is_numeric_dtype(dtype):
        return "numeric"
    if pd.api.types.is_datetime64_any_dtype(dtype):
        return "datetime"
    if pd.api.types.is_timedelta64_dtype(dtype):
        return "timedelta"
    return "text"


def _schema(frame: pd.DataFrame) -> Dict[str, str]:
    return {name: _dtype_family(dtype) for name, dtype in frame.dtypes.items()}


def bind_tracks(*tables: Any, config: Config = DEFAULT_CONFIG) -> TrackTable:
    """
    Concatenate the rows of track tables.

    Args:
        *tables: Track tables, or (nested) lists/tuples of track tables.
                 bind_tracks([t1, t2]) is the same as bind_tracks(t1, t2)
        config: Provides the canonical backend used when inputs disagree

    Returns:
        New track table with the rows of all inputs in order. Inputs are
        never modified.

    Raises:
        NotATrackTable: an argument is not a track table
        EmptyInput: no tables were given
        ProjectionMismatch: inputs do not share the same projection
        SchemaMismatch: inputs do not have the same columns and types
    """
    tracks = _flatten(tables, [])
    if not tracks:
        raise EmptyInput("bind_tracks() needs at least one track table.")

    first = tracks[0]

    mismatched = [i for i, t in enumerate(tracks) if t.proj != first.proj]
    if mismatched:
        found = ", ".join(f"#{i}: {tracks[i].proj}" for i in mismatched)
        raise ProjectionMismatch(
            f"All track tables must have the same projection. "
            f"Table #0 is {first.proj}, but {found}."
        )

    frames = [t.to_frame() for t in tracks]
    reference = _schema(frames[0])
    for i, frame in enumerate(frames[1:], start=1):
        schema = _schema(frame)
        if set(schema) != set(reference):
            missing = sorted(set(reference) - set(schema))
            extra = sorted(set(schema) - set(reference))
            raise SchemaMismatch(
                f"Table #{i} has different columns than table #0 "
                f"(missing: {missing}, extra: {extra})."
            )
        conflicts = [
            f"{name} ({reference[name]} vs {schema[name]})"
            for name in reference if schema[name] != reference[name]
        ]
        if conflicts:
            raise SchemaMismatch(
                f"Table #{i} has incompatible column types: {', '.join(conflicts)}."
            )

    kinds = {t.table_kind for t in tracks}
    if len(kinds) == 1:
        kind = first.table_kind
    else:
        kind = TableKind(config.canonical_table_kind)
        logger.debug(
            f"Mixed backends {sorted(k.value for k in kinds)}, binding as {kind.value}"
        )

    columns = list(frames[0].columns)
    combined = pd.concat([f[columns] for f in frames], ignore_index=True)

    logger.info(f"Bound {len(tracks)} track tables ({len(combined)} fixes)")
    return as_table_kind(TrackTable(combined, first.proj), kind)
