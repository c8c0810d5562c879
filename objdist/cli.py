"""
OBJDIST CLI

Usage:
    python -m objdist                                  # /tmp/objects/ -> /tmp/distances.data
    python -m objdist <input_dir> -o <output>          # explicit locations
    python -m objdist --config manifest.yaml           # locations from a manifest
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from objdist.config.loader import RunConfig
from objdist.errors import InputError
from objdist.pipeline import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objdist",
        description="Pairwise centroid distances for labeled point-cloud objects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each file in the input directory is one object; its name carries the
label and object id (e.g. label_1_object_2.txt). Output lines are:
  <label1> <object1> <label2> <object2> <distance>

Example:
  python -m objdist /tmp/objects/ -o /tmp/distances.data
"""
    )
    parser.add_argument('input_dir', nargs='?', default=None,
                        help='Object directory (default: /tmp/objects/)')
    parser.add_argument('-o', '--output', default=None,
                        help='Distance file (default: /tmp/distances.data)')
    parser.add_argument('--config', default=None,
                        help='YAML manifest with run settings')
    parser.add_argument('--offset', type=int, default=None,
                        help='Index of the x field on each point line (default: 2)')
    parser.add_argument('--strict-names', action='store_true', default=None,
                        help='Skip files whose name has no parseable label/object id')
    parser.add_argument('--parquet', default=None,
                        help='Also export distances to this parquet file')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only warnings and errors')
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """objdist CLI entry point."""
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(message)s')

    try:
        config = RunConfig.from_manifest(args.config) if args.config else RunConfig()
        config = config.with_overrides(
            input_dir=args.input_dir,
            output_path=args.output,
            point_offset=args.offset,
            strict_names=args.strict_names,
            parquet_path=args.parquet,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}")
        return 2

    if not args.quiet:
        print("=" * 70)
        print("OBJDIST: PAIRWISE CENTROID DISTANCES")
        print(f"{config.input_dir} → {config.output_path}")
        print("=" * 70)

    try:
        result = run(config)
    except InputError as e:
        print(e.message)
        return e.exit_code

    if not args.quiet:
        print(f"\nResults: {result.summary()}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
