#!/usr/bin/env python3
"""
Flight summary functions for IGC to GeoJSON converter
"""

from igc_model import Feature
from igc_utils import calculateDistance, toYMD, toHM
from igc_constants import (
    IGC_HEADER_PILOT,
    IGC_HEADER_GLIDER_TYPE,
    IGC_HEADER_GLIDER_ID,
    IGC_HEADER_SITE
)


def trackLength(feature: Feature) -> float:
    """Sum of great circle legs along the track, in meters"""
    total = 0.0
    coordinates = feature.geometry.get_coordinates()
    for prev, curr in zip(coordinates, coordinates[1:]):
        total += calculateDistance(prev[1], prev[0], curr[1], curr[0])
    return total


def flightSummary(feature: Feature) -> str:
    """Generate a summary string for a decoded (unprojected) feature"""
    geometry = feature.geometry
    first = geometry.get_first_coordinate()
    last = geometry.get_last_coordinate()
    start_time = first[-1] if first else None
    end_time = last[-1] if last else None

    pilot = feature.get(IGC_HEADER_PILOT)
    pilot = f' by {pilot}' if pilot else ''
    glider = feature.get(IGC_HEADER_GLIDER_ID) or 'Unknown'
    distance = f" {trackLength(feature) / 1000:.2f} km" if len(geometry) > 1 else ""

    # Format duration as hours:minutes
    duration_str = "N/A"
    if start_time is not None and end_time is not None:
        total_seconds = end_time - start_time
        hours = int(total_seconds // 3600)
        minutes = int((total_seconds % 3600) // 60)
        duration_str = f"{hours} hours and {minutes} minutes"

    start_pos = f"({first[1]:.6f}, {first[0]:.6f})" if first else "(N/A)"
    end_pos = f"({last[1]:.6f}, {last[0]:.6f})" if last else "(N/A)"

    heading = f"{glider} - {toYMD(start_time)}{distance}{pilot} ({duration_str})"
    underline = '\n' + ('-' * len(heading))

    return f'''{heading}{underline}
  From: {toHM(start_time)}Z {feature.get(IGC_HEADER_SITE) or 'N/A'} {start_pos}
    To: {toHM(end_time)}Z {end_pos}
Glider: {feature.get(IGC_HEADER_GLIDER_TYPE) or 'Unknown'}
Points: {len(geometry)} ({geometry.layout.value})'''
