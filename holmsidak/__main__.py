"""
Command-line front end.

Usage:
    python -m holmsidak --group 7.68,7.69,7.70 --group 7.71,7.73,7.74
    python -m holmsidak --x 7.68,7.69,7.71,7.73 --g 1,1,2,2 --control yes --tail -1

One-sided tails refer to mean_i - mean_j for each comparison i-j.
"""

import argparse
import logging
import sys

from holmsidak.core.exceptions import HolmSidakError
from holmsidak.stepdown import as_bool, as_tail, holm_sidak, holm_sidak_grouped


def _floats(text: str) -> list[float]:
    try:
        return [float(v) for v in text.split(',') if v.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected comma-separated numbers: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='holmsidak',
        description="Holm-Sidak stepdown procedure for multiple Student's t-tests",
    )
    data = parser.add_mutually_exclusive_group(required=True)
    data.add_argument(
        '--group', action='append', type=_floats, metavar='V1,V2,...',
        help='Observations of one group; repeat once per group',
    )
    data.add_argument(
        '--x', type=_floats, metavar='V1,V2,...',
        help='All observations as one vector (requires --g)',
    )
    parser.add_argument(
        '--g', type=_floats, metavar='L1,L2,...',
        help='Integer group label for each value of --x',
    )
    parser.add_argument(
        '--control', default='no',
        help='Group 1 is a control group (yes/no, 1/0; default no)',
    )
    parser.add_argument(
        '--alpha', type=float, default=0.05,
        help='Significance level (default 0.05)',
    )
    parser.add_argument(
        '--tail', default='two.sided',
        help=(
            'two.sided, less or greater; or the codes 2, -1, 1 (default two.sided). '
            'The direction follows mean_i - mean_j for each pair i-j, so less '
            '(-1) tests mean_i < mean_j'
        ),
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Log debug output to stderr',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.x is not None and args.g is None:
        parser.error('--x requires --g')

    try:
        control = as_bool(args.control, 'control')
        tail = as_tail(args.tail)
        if args.x is not None:
            result = holm_sidak_grouped(
                args.x, args.g, control=control, alpha=args.alpha, tail=tail,
            )
        else:
            result = holm_sidak(
                *args.group, control=control, alpha=args.alpha, tail=tail,
            )
    except HolmSidakError as e:
        print(f"holmsidak: error: {e}", file=sys.stderr)
        return 2

    print(result.summary())
    return 0


if __name__ == '__main__':
    sys.exit(main())
