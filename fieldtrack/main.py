"""
Command-line entry point for the field tracking location tools.

  fieldtrack classify 14.6349 -90.5069
  fieldtrack classify 21.0 -86.9 --country México
  fieldtrack regions Guatemala
  fieldtrack summary visits.json --country Guatemala --chart

Classification here is the offline bounding-box fallback only.
"""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from fieldtrack.models.location import LocationRecord
from fieldtrack.services.region_aggregator import build_activity_chart, build_heat_map
from fieldtrack.services.region_classifier import (
    RegionDefaultMode,
    classify_country,
    classify_region,
    known_regions,
    normalize_country_name,
)


def parse_mode(mode_str: str) -> RegionDefaultMode:
    """Parse default-label mode string."""
    mode_map = {
        'heat-map': RegionDefaultMode.HEAT_MAP,
        'heatmap': RegionDefaultMode.HEAT_MAP,
        'capture': RegionDefaultMode.CAPTURE,
    }
    mode_str_lower = mode_str.lower()
    if mode_str_lower not in mode_map:
        raise ValueError(f"Unknown mode: {mode_str}")
    return mode_map[mode_str_lower]


def load_records(path: str) -> List[LocationRecord]:
    """Load visit records from a JSON list."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of location records")
    return [LocationRecord.model_validate(item) for item in data]


def cmd_classify(args) -> int:
    mode = parse_mode(args.mode)
    country = normalize_country_name(args.country) or classify_country(args.lat, args.lng)
    print(f"Country: {country or '(unknown)'}")
    if not country:
        print("Region:  (none)")
        return 0
    print(f"Region:  {classify_region(args.lat, args.lng, country, mode)}")
    return 0


def cmd_regions(args) -> int:
    names = known_regions(args.country)
    if not names:
        print(f"Error: no region catalog for country: {args.country}", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def cmd_summary(args) -> int:
    mode = parse_mode(args.mode)
    records = load_records(args.file)
    builder = build_activity_chart if args.chart else build_heat_map
    buckets = builder(records, args.country, mode)

    print(f"\n{'='*50}")
    print(f"VISITS BY REGION: {normalize_country_name(args.country)}")
    print(f"{'='*50}")
    if not buckets:
        print("  (no visits)")
    for bucket in buckets:
        print(f"  {bucket.region:<28} {bucket.count:>6}  {bucket.intensity:6.1f}%")
    print(f"  {'TOTAL':<28} {sum(b.count for b in buckets):>6}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fieldtrack',
        description='Country/region labelling for field visit coordinates',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    classify_parser = subparsers.add_parser('classify', help='Classify a coordinate')
    classify_parser.add_argument('lat', type=float, help='Latitude in degrees')
    classify_parser.add_argument('lng', type=float, help='Longitude in degrees')
    classify_parser.add_argument(
        '--country',
        type=str,
        default=None,
        help='Known country (skips country classification)'
    )
    classify_parser.add_argument(
        '--mode',
        type=str,
        default='heat-map',
        help='Default label family: heat-map or capture (default: heat-map)'
    )
    classify_parser.set_defaults(func=cmd_classify)

    regions_parser = subparsers.add_parser('regions', help='List region names for a country')
    regions_parser.add_argument('country', type=str)
    regions_parser.set_defaults(func=cmd_regions)

    summary_parser = subparsers.add_parser('summary', help='Count visits per region from a JSON file')
    summary_parser.add_argument('file', type=str, help='JSON list of location records')
    summary_parser.add_argument('--country', type=str, required=True)
    summary_parser.add_argument(
        '--chart',
        action='store_true',
        help='Zero-filled activity chart instead of heat-map buckets'
    )
    summary_parser.add_argument('--mode', type=str, default='heat-map')
    summary_parser.set_defaults(func=cmd_summary)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ValueError, ValidationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
