"""
Exception types raised by track table operations.

Every failure is raised immediately to the caller. Operations that mutate a
track table check everything first, so a raised error means nothing changed.
"""


class TrackDFError(Exception):
    """Base class for all track table errors."""


class NotATrackTable(TrackDFError, TypeError):
    """Argument is not a track table (or lacks its required columns)."""


class InvalidProjectionSpec(TrackDFError, ValueError):
    """Projection value is neither a parsable string nor a descriptor."""


class IncompleteCoordinates(TrackDFError, ValueError):
    """Reprojection attempted while some x/y values are missing."""


class ProjectionMismatch(TrackDFError, ValueError):
    """Row-binding attempted on tables with differing projections."""


class SchemaMismatch(TrackDFError, ValueError):
    """Row-binding attempted on tables with incompatible columns."""


class EmptyInput(TrackDFError, ValueError):
    """Row-binding called with no tables."""


class LengthMismatch(TrackDFError, ValueError):
    """
    Sequences that must line up have different lengths.

    Raised by append_error() for error codes of different lengths, and by
    track_df() for columns of different lengths.
    """
