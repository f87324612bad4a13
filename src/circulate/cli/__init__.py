"""Circulate CLI — inspect the route table and error normalization.

Entry point registered as ``circulate`` in ``pyproject.toml``::

    [project.scripts]
    circulate = "circulate.cli:main"

The route table is read from ``CIRCULATE_*`` environment variables
(see ``GateConfig.from_env``).
"""

import argparse
import json
import sys

from circulate.config import GateConfig
from circulate.errors import CirculateError
from circulate.normalizer import normalize
from circulate.routing.gate import Redirect, RouteGate
from circulate.routing.table import RouteTable


def _format_routes(table: RouteTable) -> str:
    lines = [
        f"root          {table.root_path}",
        f"login         {table.login_path}",
        f"landing       {table.default_authenticated_redirect}",
    ]
    lines.extend(f"public        {prefix}*" for prefix in table.public_prefixes)
    lines.extend(f"auth-only     {path}" for path in sorted(table.auth_only_routes))
    lines.extend(f"protected     {path}" for path in sorted(table.protected_routes))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``circulate`` command."""
    parser = argparse.ArgumentParser(
        prog="circulate",
        description="Session-gated routing and error normalization.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- circulate decide -------------------------------------------------
    decide_parser = subparsers.add_parser("decide", help="Show the routing decision for a path")
    decide_parser.add_argument("path", help="Request path (no query string)")
    decide_parser.add_argument(
        "--authenticated",
        action="store_true",
        help="Evaluate as a caller with a valid session",
    )

    # -- circulate normalize ----------------------------------------------
    normalize_parser = subparsers.add_parser(
        "normalize", help="Normalize an error message as the UI would see it"
    )
    normalize_parser.add_argument("message", help="Exception text, e.g. 'HTTP error! status: 404 ...'")

    # -- circulate routes -------------------------------------------------
    subparsers.add_parser("routes", help="Print the configured route table")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "normalize":
        result = normalize(CirculateError(args.message))
        print(json.dumps(result.to_dict()))
        return

    try:
        config = GateConfig.from_env()
    except CirculateError as exc:
        print(f"circulate: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.command == "decide":
        decision = RouteGate(config.routes).decide(args.path, args.authenticated)
        if isinstance(decision, Redirect):
            print(f"redirect {decision.location}")
        else:
            print("allow")
    elif args.command == "routes":
        print(_format_routes(config.routes))
