#!/usr/bin/env python3
"""
IGC to GeoJSON Converter

This script decodes IGC flight logs into GeoJSON track features.

Usage:
    python igc2geojson.py [-c config] [-z altitudeMode] [-p projection] [-o outputFolder] file.igc [file2.igc ...]
"""

import argparse
import sys
import logging
from typing import List

from igc_config import Config
from igc_parser import parseIgcFile
from igc_projection import transformGeometry, getTransformer
from igc_summary import flightSummary
from igc_writer import writeOutputFile
from igc_constants import OUTPUT_SUFFIX, DATA_PROJECTION, AltitudeModeName

logger = logging.getLogger('igc2geojson')


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert IGC flight logs into GeoJSON track features',
        epilog='Example: python igc2geojson.py -z gps vuelo.igc'
    )

    parser.add_argument('-c', '--config', default=None, help='Path to config file')
    parser.add_argument('-z', '--altitude-mode', dest='altitude_mode', default=None,
                        choices=[AltitudeModeName.NONE, AltitudeModeName.GPS, AltitudeModeName.BAROMETRIC],
                        help='Altitude source for track points (default: none)')
    parser.add_argument('-p', '--projection', default=None, help='Output projection, e.g. EPSG:3857')
    parser.add_argument('-o', '--output', default=None, help='Folder to write GeoJSON output files')
    parser.add_argument('-i', '--indent', type=int, default=None, help='Indent GeoJSON output')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('trackfile', nargs='+', help='Path to one or more IGC files')
    return parser


def process_file(config: Config, in_path: str) -> bool:
    """Decode one IGC file and write its GeoJSON; returns True on success"""
    logger.info(f"Processing {in_path}...")
    try:
        with open(in_path, 'r', encoding='utf-8', errors='ignore') as track_file:
            features = parseIgcFile(config, track_file)
    except OSError as e:
        logger.error(f"Cannot read {in_path}: {e}")
        return False

    if not features:
        logger.error(f"No valid track data found in {in_path}")
        return False

    for feature in features:
        logger.info(flightSummary(feature))
        feature.geometry = transformGeometry(feature.geometry, feature_projection=config.feature_projection)

    out_path = config.output_path_for(in_path, OUTPUT_SUFFIX)
    try:
        with open(out_path, 'w', encoding='utf-8') as out_file:
            writeOutputFile(config, out_file, features)
    except OSError as e:
        logger.error(f"Cannot write {out_path}: {e}")
        return False

    logger.info(f"Successfully generated: {out_path}")
    return True


def process_files(config: Config, in_paths: List[str]) -> int:
    """Process every file; returns the number of failures"""
    failures = 0
    for in_path in in_paths:
        if not process_file(config, in_path):
            failures += 1
    return failures


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        config = Config(args)
        if config.feature_projection:
            # Fail before any file is read if the projection is unusable
            getTransformer(DATA_PROJECTION, config.feature_projection)
        failures = process_files(config, args.trackfile)
    except ValueError as e:
        logger.critical(f"Invalid input: {e}")
        return 2
    except Exception as e:
        logger.critical(f"Unexpected error: {e}", exc_info=True)
        return 1

    logger.info("Processing complete.")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
