"""
Tests for the exception hierarchy.
"""

import pytest
from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trackdf import (
    TrackDFError,
    NotATrackTable,
    InvalidProjectionSpec,
    IncompleteCoordinates,
    ProjectionMismatch,
    SchemaMismatch,
    EmptyInput,
    LengthMismatch,
)


@pytest.mark.parametrize("error", [
    InvalidProjectionSpec,
    IncompleteCoordinates,
    ProjectionMismatch,
    SchemaMismatch,
    EmptyInput,
    LengthMismatch,
])
def test_value_errors(error):
    assert issubclass(error, TrackDFError)
    assert issubclass(error, ValueError)


def test_not_a_track_table_is_type_error():
    assert issubclass(NotATrackTable, TrackDFError)
    assert issubclass(NotATrackTable, TypeError)
