#!/usr/bin/env python3
"""
GeoJSON writer module for IGC to GeoJSON converter

This module writes decoded IGC features as a GeoJSON FeatureCollection.
Each position keeps the decoded layout: x, y, [z,] t.
"""

import json
from typing import Any, Dict, List, TextIO

from igc_model import Feature
from igc_projection import sameProjection
from igc_constants import (
    DATA_PROJECTION,
    GEOJSON_FEATURE_COLLECTION,
    GEOJSON_FEATURE,
    GEOJSON_LINE_STRING
)


class GeoJsonWriter:
    """
    Handles writing GeoJSON documents for decoded IGC features.

    RFC 7946 GeoJSON is always WGS84 longitude/latitude. When a feature
    projection other than EPSG:4326 is configured the output no longer
    follows RFC 7946, so the collection carries the older named "crs"
    member to tell readers which CRS the positions are in.
    """

    def __init__(self, config):
        """Initialize with configuration"""
        self.config = config

    @staticmethod
    def format_feature(feature: Feature) -> Dict[str, Any]:
        """GeoJSON mapping for one feature"""
        geometry = feature.geometry
        return {
            'type': GEOJSON_FEATURE,
            'geometry': {
                'type': GEOJSON_LINE_STRING,
                'coordinates': [list(point) for point in geometry.get_coordinates()],
            },
            'properties': feature.get_properties(),
        }

    def format_collection(self, features: List[Feature]) -> Dict[str, Any]:
        collection = {
            'type': GEOJSON_FEATURE_COLLECTION,
            'features': [self.format_feature(feature) for feature in features],
        }
        projection = self.config.feature_projection if self.config is not None else None
        if projection and not sameProjection(projection, DATA_PROJECTION):
            collection['crs'] = {
                'type': 'name',
                'properties': {'name': projection},
            }
        return collection

    def write_file(self, out_file: TextIO, features: List[Feature]) -> None:
        """Write a complete GeoJSON document"""
        indent = self.config.indent if self.config is not None else None
        json.dump(self.format_collection(features), out_file, indent=indent)
        out_file.write('\n')


# Public function
def writeOutputFile(config, out_file: TextIO, features: List[Feature]) -> None:
    """Write a GeoJSON file from the decoded features"""
    writer = GeoJsonWriter(config)
    writer.write_file(out_file, features)
