"""
Inequality Chains Command-Line Interface

Builds a chain from already-separated tokens and prints the statements it
denotes, or checks the order laws of a reference domain.

    chainctl statements 3 '<=' 4 '<' 7 = 7 '<' 8 --check
    chainctl laws --domain rational
"""

import sys
import argparse
import logging
from fractions import Fraction
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from . import __version__
from .builders import build_chain
from .embedding import DEFAULT_TOWER
from .errors import ChainError
from .fingerprint import canonical_dumps, chain_fingerprint
from .order import (
    INTEGER_ORDER,
    RATIONAL_ORDER,
    REAL_ORDER,
    OrderInstance,
    check_order_laws,
)
from .propositions import truth
from .statements import describe


def _parse_auto(text: str) -> Any:
    try:
        return int(text)
    except ValueError:
        pass
    if "/" in text:
        return Fraction(text)
    return float(text)


# domain -> (term parser, order instance, law samples)
DOMAINS: Dict[str, Tuple[Callable[[str], Any], OrderInstance, List[Any]]] = {
    'integer': (int, INTEGER_ORDER, list(range(-3, 4))),
    'rational': (Fraction, RATIONAL_ORDER, [Fraction(k, 2) for k in range(-4, 5)]),
    'real': (float, REAL_ORDER, [float(v) for v in np.linspace(-2.0, 2.0, 9)]),
    'auto': (_parse_auto, REAL_ORDER, [1, Fraction(3, 2), 2.5, -1, 0]),
}


def parse_tokens(tokens: List[str], parse_term: Callable[[str], Any]):
    """Split TERM SYM TERM [SYM TERM ...] into a first term and pairs."""
    if len(tokens) < 3 or len(tokens) % 2 == 0:
        raise ValueError("Expected TERM SYM TERM [SYM TERM ...]")
    first = parse_term(tokens[0])
    pairs = [
        (tokens[i], parse_term(tokens[i + 1]))
        for i in range(1, len(tokens), 2)
    ]
    return first, pairs


def cmd_statements(args):
    """Build a chain and print its statements."""
    parse_term, order, _ = DOMAINS[args.domain]
    tower = DEFAULT_TOWER if args.domain == 'auto' else None

    try:
        first, pairs = parse_tokens(args.tokens, parse_term)
        chain = build_chain(first, pairs, tower=tower)
    except (ChainError, ValueError, ZeroDivisionError) as e:
        print(f"Error: {e}")
        return 2

    summary = describe(chain, order)

    if args.json:
        data = summary.to_canonical()
        data['fingerprint'] = chain_fingerprint(chain)
        if args.check:
            data['holds'] = {
                'global': truth(summary.global_statement),
                'weak_global': truth(summary.weak_global_statement),
                'total': truth(summary.total_statement),
            }
        print(canonical_dumps(data, indent=2))
        return 0

    flow = summary.relation_flow.symbol.value if summary.relation_flow else "="
    print(f"Chain:         {chain}")
    print(f"Shape:         {summary.shape}")
    print(f"Relation flow: {flow}")
    rows = [
        ("Global", summary.global_statement),
        ("Weak global", summary.weak_global_statement),
        ("Total", summary.total_statement),
    ]
    for label, statement in rows:
        line = f"{label + ':':15}{statement}"
        if args.check:
            line += f"  [{'holds' if truth(statement) else 'fails'}]"
        print(line)
    return 0


def cmd_laws(args):
    """Check the order laws of a domain's reference instance."""
    _, order, samples = DOMAINS[args.domain]
    report = check_order_laws(order, samples)
    print(f"Order instance: {report.order_name}")
    print(f"Samples: {report.samples_checked}")
    if report.ok:
        print("All order laws hold")
        return 0
    for violation in report.violations:
        print(f"  {violation}")
    print(f"{len(report.violations)} violation(s)")
    return 1


def cmd_version(args):
    """Print version information."""
    print(f"inequality-chains {__version__}")
    return 0


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='chainctl',
        description='Inequality chains - global, weak global and total statements'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    st_parser = subparsers.add_parser('statements', help='Print the statements of a chain')
    st_parser.add_argument('tokens', nargs='+',
                           help='TERM SYM TERM [SYM TERM ...]; SYM in = < <= ≤ > >= ≥')
    st_parser.add_argument('--domain', '-d', choices=list(DOMAINS.keys()), default='integer',
                           help='Term domain (default: integer; auto mixes types)')
    st_parser.add_argument('--json', action='store_true',
                           help='Print canonical JSON')
    st_parser.add_argument('--check', action='store_true',
                           help='Evaluate each statement')
    st_parser.set_defaults(func=cmd_statements)

    laws_parser = subparsers.add_parser('laws', help='Check order laws of a domain')
    laws_parser.add_argument('--domain', '-d', choices=list(DOMAINS.keys()), default='integer',
                             help='Term domain (default: integer)')
    laws_parser.set_defaults(func=cmd_laws)

    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
