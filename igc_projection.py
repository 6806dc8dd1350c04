#!/usr/bin/env python3
"""
Reprojection of decoded tracks

Decoded tracks are always geographic WGS84 (EPSG:4326, longitude first).
This module hands them to pyproj when a caller asks for another projection.
"""

import logging
from functools import lru_cache
from typing import Optional

import pyproj
from pyproj.exceptions import CRSError

from igc_model import LineString
from igc_constants import DATA_PROJECTION

# Configure logger
logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def getTransformer(source: str, target: str) -> pyproj.Transformer:
    """Build (and cache) an x/y transformer between two CRS identifiers"""
    try:
        return pyproj.Transformer.from_crs(source, target, always_xy=True)
    except CRSError as e:
        raise ValueError(f"Cannot transform from {source} to {target}: {e}") from e


def sameProjection(a: str, b: str) -> bool:
    return a.strip().upper() == b.strip().upper()


def transformGeometry(geometry: LineString,
                      data_projection: Optional[str] = None,
                      feature_projection: Optional[str] = None) -> LineString:
    """
    Transform the x/y components of a track from the data projection to the
    feature projection. z and t components are copied unchanged.
    """
    source = data_projection or DATA_PROJECTION
    if not feature_projection or sameProjection(source, feature_projection):
        return geometry

    transformer = getTransformer(source, feature_projection)
    stride = geometry.stride
    flat = list(geometry.flat_coordinates)
    xs = flat[0::stride]
    ys = flat[1::stride]
    if xs:
        new_xs, new_ys = transformer.transform(xs, ys)
        flat[0::stride] = list(new_xs)
        flat[1::stride] = list(new_ys)

    logger.debug(f"Transformed {len(xs)} points from {source} to {feature_projection}")
    return LineString(flat, geometry.layout)
