"""
trackdf - Track tables for movement data.

Tables of tracking fixes (id, time, x, y[, z]) from GPS or video trackers,
with an attached projection that is kept consistent when tables are
reprojected or combined.
"""

__version__ = "0.1.0"

from .config import Config, DEFAULT_CONFIG
from .coords import Projection, UNPROJECTED, parse_projection, reproject_xy
from .errors import (
    TrackDFError,
    NotATrackTable,
    InvalidProjectionSpec,
    IncompleteCoordinates,
    ProjectionMismatch,
    SchemaMismatch,
    EmptyInput,
    LengthMismatch,
)
from .track import (
    TableKind, TrackTable, track_df, is_track, as_table_kind, describe,
    is_geo, n_dims, n_tracks,
    projection, set_projection, project,
)
from .bind import bind_tracks
from .utils import mode_of, append_error
from .io import load_tracks

__all__ = [
    'Config', 'DEFAULT_CONFIG',
    'Projection', 'UNPROJECTED', 'parse_projection', 'reproject_xy',
    'TrackDFError', 'NotATrackTable', 'InvalidProjectionSpec',
    'IncompleteCoordinates', 'ProjectionMismatch', 'SchemaMismatch',
    'EmptyInput', 'LengthMismatch',
    'TableKind', 'TrackTable', 'track_df', 'is_track', 'as_table_kind', 'describe',
    'is_geo', 'n_dims', 'n_tracks',
    'projection', 'set_projection', 'project',
    'bind_tracks',
    'mode_of', 'append_error',
    'load_tracks',
]
