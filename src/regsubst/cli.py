"""CLI interface for regsubst.

Usage:
    # One substitution (stdin: JSON string or array, stdout: JSON result)
    echo '["a1","b2"]' | python -m regsubst.cli sub '[0-9]+' '<\\0>' --flags G

    # Lookup-table replacement
    echo '"catdog"' | \
        python -m regsubst.cli sub 'cat|dog' '{"cat":"feline","dog":"canine"}' --map --flags G

    # Apply a YAML rule set
    echo '"192.168.1.5"' | python -m regsubst.cli apply --config rules.yaml
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys

from .config import create_rule_set
from .errors import SubstitutionError
from .function import regsubst
from .types import Sensitive

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = os.environ.get("REGSUBST_CONFIG", "regsubst.yaml")


def _read_target(args: argparse.Namespace):
    target = json.loads(sys.stdin.read())
    return Sensitive(target) if args.sensitive else target


def _write(value) -> None:
    if isinstance(value, Sensitive):
        json.dump(repr(value), sys.stdout)
    else:
        json.dump(value, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_sub(args: argparse.Namespace) -> None:
    """Apply one pattern/replacement to the JSON value on stdin."""
    replacement = json.loads(args.replacement) if args.map else args.replacement
    _write(regsubst(_read_target(args), args.pattern, replacement, args.flags))


def cmd_apply(args: argparse.Namespace) -> None:
    """Apply a YAML rule set to the JSON value on stdin."""
    rule_set = create_rule_set(args.config)
    _write(rule_set.apply(_read_target(args)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="regsubst",
        description="Regular expression substitution over strings and string arrays",
    )
    parser.add_argument("--sensitive", action="store_true",
                        help="Treat the input as sensitive; never print it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    p_sub = sub.add_parser("sub", help="Substitute with one pattern")
    p_sub.add_argument("pattern")
    p_sub.add_argument("replacement")
    p_sub.add_argument("--flags", default=None, help="Any of G, E, I, M")
    p_sub.add_argument("--map", action="store_true",
                       help="Replacement is a JSON object of match -> text")
    p_apply = sub.add_parser("apply", help="Apply a YAML rule set")
    p_apply.add_argument("--config", default=DEFAULT_CONFIG, help="Rule set path")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cmds = {
        "sub": cmd_sub,
        "apply": cmd_apply,
    }
    try:
        cmds[args.command](args)
    except (SubstitutionError, TypeError, ValueError, OSError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
