#!/usr/bin/env python3
"""
Command-line tools for working with a shortcut config file.

Usage:
    ezredirect-cli check <config>
    ezredirect-cli list <config>
    ezredirect-cli resolve <config> <query...>
"""

import argparse
import json
import sys
from typing import List, Optional

from ezredirect.lib.code_rules import builtin_code_rules
from ezredirect.lib.errors import ConfigError, RedirectError
from ezredirect.lib.resolver import Resolver
from ezredirect.lib.ruleset import FALLBACK_KEY, RuleSet, load_ruleset
from ezredirect.lib.common.logging_config import setup_logging


def _print_error(message: str) -> None:
    print(json.dumps({
        "success": False,
        "error": message
    }, indent=2), file=sys.stderr)


class RedirectorCLI:
    """Command-line interface over a rule set."""

    def __init__(
        self,
        config_path: str,
        builtin_rules: bool = False,
        strict: bool = True,
        verbose: bool = False,
    ):
        """Initialize CLI."""
        self.config_path = config_path
        self.builtin_rules = builtin_rules
        self.strict = strict
        self.logger = setup_logging(
            level="DEBUG" if verbose else "WARNING",
            stream=sys.stderr,
        )
        self.ruleset: Optional[RuleSet] = None

    def initialize(self) -> None:
        """Build the rule set.

        Raises:
            ConfigError: If the rule set cannot be built
        """
        code_rules = builtin_code_rules() if self.builtin_rules else []
        self.ruleset = load_ruleset(
            self.config_path,
            strict=self.strict,
            code_rules=code_rules,
            logger=self.logger,
        )

    def check(self) -> int:
        """Validate the config file."""
        print(json.dumps({
            "success": True,
            "config": self.config_path,
            "rules": len(self.ruleset),
            "has_fallback": self.ruleset.fallback is not None,
        }, indent=2))
        return 0

    def list_rules(self) -> int:
        """List every shortcut."""
        rules = [
            {
                "key": key,
                "kind": rule.kind,
                "target": rule.describe(),
                "fallback": key == FALLBACK_KEY,
            }
            for key, rule in sorted(self.ruleset.items())
        ]
        print(json.dumps({
            "success": True,
            "count": len(rules),
            "rules": rules
        }, indent=2))
        return 0

    def resolve(self, query: str) -> int:
        """Resolve a query without starting the server."""
        resolver = Resolver(self.ruleset, logger=self.logger)
        try:
            outcome = resolver.resolve_with_key(query)
        except RedirectError as e:
            _print_error(str(e))
            return 1

        print(json.dumps({
            "success": True,
            "query": query,
            "key": outcome.key,
            "fallback": outcome.fallback,
            "target": outcome.target,
        }, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ezredirect-cli",
        description="ezredirect config tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a config file
  %(prog)s check example-configs/simple.txt

  # List shortcuts
  %(prog)s list example-configs/simple.txt

  # See where a query would go
  %(prog)s resolve example-configs/simple.txt npm file finder
        """
    )

    parser.add_argument(
        "--builtin-rules",
        action="store_true",
        help="Register the built-in code rules (g, gmail, cal, npm, yt)"
    )

    parser.add_argument(
        "--no-strict",
        dest="strict",
        action="store_false",
        help="Skip malformed config lines instead of failing"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    check_parser = subparsers.add_parser("check", help="Validate a config file")
    check_parser.add_argument("config", help="Shortcut config file")

    list_parser = subparsers.add_parser("list", help="List shortcuts")
    list_parser.add_argument("config", help="Shortcut config file")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a query")
    resolve_parser.add_argument("config", help="Shortcut config file")
    resolve_parser.add_argument("query", nargs="+", help="Query as typed in the address bar")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = RedirectorCLI(
        config_path=args.config,
        builtin_rules=args.builtin_rules,
        strict=args.strict,
        verbose=args.verbose,
    )

    try:
        cli.initialize()
    except ConfigError as e:
        _print_error(str(e))
        return 1

    if args.command == "check":
        return cli.check()
    elif args.command == "list":
        return cli.list_rules()
    elif args.command == "resolve":
        return cli.resolve(" ".join(args.query))

    parser.print_help()
    return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
