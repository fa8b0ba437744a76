"""
Projection descriptors and coordinate transformation.

A track table carries exactly one Projection. It is either UNPROJECTED
(raw numeric coordinates, nothing to transform from) or wraps a pyproj CRS
parsed from a PROJ string, an EPSG code ("EPSG:4326") or WKT.

All projection math is delegated to pyproj.
"""

import logging
from typing import Any, Optional, Tuple

import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError

from .errors import InvalidProjectionSpec

logger = logging.getLogger(__name__)


class Projection:
    """
    Coordinate reference system descriptor of a track table.

    Two descriptors are equal when both are unprojected, or when their
    CRSs are structurally equal (pyproj comparison, not identity).
    """

    def __init__(self, crs: Optional[CRS] = None):
        if crs is not None and not isinstance(crs, CRS):
            raise InvalidProjectionSpec(
                f"Expected a pyproj CRS, got {type(crs).__name__}"
            )
        self._crs = crs

    @property
    def crs(self) -> Optional[CRS]:
        return self._crs

    @property
    def is_defined(self) -> bool:
        """True if this describes a real coordinate system."""
        return self._crs is not None

    @property
    def projargs(self) -> Optional[str]:
        """The projection string as given, or None when unprojected."""
        if self._crs is None:
            return None
        return self._crs.srs

    @property
    def is_geographic(self) -> bool:
        """True for longitude/latitude systems."""
        return self._crs is not None and self._crs.is_geographic

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Projection):
            return NotImplemented
        if self._crs is None or other._crs is None:
            return self._crs is None and other._crs is None
        return self._crs == other._crs

    # Equivalent CRSs can have different definitions, so no stable hash
    __hash__ = None

    def __repr__(self) -> str:
        if self._crs is None:
            return "Projection(unprojected)"
        return f"Projection({self.projargs!r})"

    def __str__(self) -> str:
        return self.projargs if self._crs is not None else "unprojected"


UNPROJECTED = Projection()


def parse_projection(spec: Any) -> Projection:
    """
    Turn a user supplied projection value into a Projection.

    Args:
        spec: A Projection, a pyproj CRS, a projection string
              (e.g. "+proj=longlat", "EPSG:32610") or None for unprojected

    Returns:
        Projection descriptor

    Raises:
        InvalidProjectionSpec: if spec is of another type or cannot be parsed
    """
    if spec is None:
        return UNPROJECTED
    if isinstance(spec, Projection):
        return spec
    if isinstance(spec, CRS):
        return Projection(spec)
    if not isinstance(spec, str):
        raise InvalidProjectionSpec(
            f"Projection must be a string or a projection descriptor, "
            f"got {type(spec).__name__}"
        )
    if not spec.strip():
        raise InvalidProjectionSpec("Projection string is empty")

    try:
        crs = CRS.from_user_input(spec)
    except CRSError as e:
        raise InvalidProjectionSpec(f"Invalid projection {spec!r}: {e}") from e

    return Projection(crs)


def reproject_xy(
    x: np.ndarray,
    y: np.ndarray,
    source: Projection,
    target: Projection
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Transform coordinate pairs from one projection to another.

    Args:
        x: x / longitude array
        y: y / latitude array
        source: Current (defined) projection of the coordinates
        target: Projection to transform into (must be defined)

    Returns:
        Tuple of transformed (x, y) float arrays, same order as the input
    """
    if not source.is_defined or not target.is_defined:
        raise InvalidProjectionSpec(
            "Both projections must be defined to transform coordinates "
            f"(from {source} to {target})"
        )

    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    transformer = Transformer.from_crs(source.crs, target.crs, always_xy=True)
    new_x, new_y = transformer.transform(x, y)

    logger.debug(f"Transformed {len(x)} points: {source} -> {target}")
    return (
        np.asarray(new_x, dtype=np.float64),
        np.asarray(new_y, dtype=np.float64)
    )
