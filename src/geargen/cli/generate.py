"""
Command-line interface for gear profile generation.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from ..enums import GearKind, Quality
from ..calculator.errors import GearGeometryError
from ..calculator.gear_types import generate, parse_gear_params
from ..calculator.output import export_filename, to_json, to_markdown, to_summary
from ..calculator.validation import validate_design

# CLI option dest -> parameter field
_PARAM_OPTIONS = (
    "module",
    "teeth",
    "pressure_angle",
    "face_width",
    "hub_diameter",
    "bore_diameter",
    "helix_angle",
    "pitch_angle",
    "lead_angle",
    "sun_teeth",
    "planet_teeth",
    "planet_count",
    "quality",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geargen",
        description="Calculate involute gear dimensions and 2D tooth profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Spur gear, module 2, 20 teeth (defaults)
  geargen spur

  # Helical gear as JSON with the sampled tooth outline
  geargen helical --module 1.5 --teeth 32 --helix-angle 20 --format json --points

  # Internal ring gear, markdown report
  geargen internal --teeth 60 --format markdown

  # Planetary train; refuse planet counts that cannot mesh
  geargen planetary --sun-teeth 20 --planet-teeth 10 --planet-count 3 --strict
        """
    )

    parser.add_argument(
        'kind',
        choices=[k.value for k in GearKind],
        help='Gear family'
    )

    parser.add_argument('--module', type=float, default=None,
                        help='Module in mm (default: 2)')
    parser.add_argument('--teeth', type=int, default=None,
                        help='Tooth count; worm starts; rack tooth repeats (default: 20)')
    parser.add_argument('--pressure-angle', type=float, default=None,
                        help='Pressure angle in degrees (default: 20)')
    parser.add_argument('--face-width', type=float, default=None,
                        help='Face width in mm (default: 10)')
    parser.add_argument('--hub-diameter', type=float, default=None,
                        help='Hub diameter in mm (default: 10)')
    parser.add_argument('--bore-diameter', type=float, default=None,
                        help='Bore diameter in mm (default: 5)')
    parser.add_argument('--helix-angle', type=float, default=None,
                        help='Helix angle in degrees, helical only (default: 15)')
    parser.add_argument('--pitch-angle', type=float, default=None,
                        help='Pitch cone angle in degrees, bevel only (default: 45)')
    parser.add_argument('--lead-angle', type=float, default=None,
                        help='Lead angle in degrees, worm only (default: 5)')
    parser.add_argument('--sun-teeth', type=int, default=None,
                        help='Sun tooth count, planetary only (default: 20)')
    parser.add_argument('--planet-teeth', type=int, default=None,
                        help='Planet tooth count, planetary only (default: 10)')
    parser.add_argument('--planet-count', type=int, default=None,
                        help='Number of planets, planetary only (default: 3)')
    parser.add_argument('--quality', choices=[q.value for q in Quality], default=None,
                        help='Sampling quality (default: medium)')

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Planetary: reject uneven planet spacing and overlapping planets'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'json', 'markdown'],
        default='summary',
        help='Output format (default: summary)'
    )

    parser.add_argument(
        '--points',
        action='store_true',
        help='Include display points in JSON output'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    data = {'kind': args.kind}
    for name in _PARAM_OPTIONS:
        value = getattr(args, name)
        if value is not None:
            data[name] = value
    if args.strict:
        data['strict'] = True

    try:
        params = parse_gear_params(data)
        result = generate(params)
    except GearGeometryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 1

    validation = validate_design(result)

    if args.format == 'json':
        print(to_json(result, validation, include_points=args.points))
    elif args.format == 'markdown':
        print(to_markdown(result, validation))
    else:
        print(to_summary(result))
        if validation.messages:
            print("")
            print("Validation:")
            for msg in validation.messages:
                print(f"  [{msg.severity.value.upper()}] {msg.code}: {msg.message}")
        print("")
        print(f"Export name: {export_filename(params)}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
