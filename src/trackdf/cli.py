"""
Command line interface.

Usage:
    trackdf summary data/tracks.csv --proj
    trackdf project data/tracks.csv --from "+proj=longlat" --to EPSG:32610 -o utm.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .errors import TrackDFError
from .io import load_tracks
from .track import describe, project

logger = logging.getLogger(__name__)


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trackdf",
        description="Inspect and reproject tracking data tables"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="JSON configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary = subparsers.add_parser("summary", help="Print a summary of a track table")
    summary.add_argument("data", type=Path, help="CSV or parquet file")
    summary.add_argument(
        "--proj",
        nargs="?",
        const=config.default_projection,
        default=None,
        help=f"Projection of the coordinates (flag alone: {config.default_projection})"
    )

    reproject = subparsers.add_parser("project", help="Reproject the coordinates")
    reproject.add_argument("data", type=Path, help="CSV or parquet file")
    reproject.add_argument(
        "--from",
        dest="source",
        nargs="?",
        const=config.default_projection,
        default=config.default_projection,
        help=f"Current projection (default: {config.default_projection})"
    )
    reproject.add_argument("--to", dest="target", required=True, help="New projection")
    reproject.add_argument(
        "--output", "-o",
        type=Path,
        required=True,
        help="Output CSV file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    # Pre-parse --config so projection defaults come from it
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", "-c", type=Path, default=None)
    known, _ = pre.parse_known_args(argv)
    config = Config.from_json(known.config) if known.config else Config()

    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        if args.command == "summary":
            tracks = load_tracks(args.data, proj=args.proj)
            print(describe(tracks))
        else:
            tracks = load_tracks(args.data, proj=args.source)
            projected = project(tracks, args.target)
            args.output.parent.mkdir(parents=True, exist_ok=True)
            projected.to_frame().to_csv(args.output, index=False)
            logger.info(f"Saved {len(projected)} fixes to {args.output}")
    except (TrackDFError, ValueError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
