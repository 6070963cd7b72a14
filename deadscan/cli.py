"""CLI entrypoints for deadscan commands."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from .analyzers import discover_analyzers, get_analyzer
from .config import ConfigError, load_config
from .logging import configure_logging
from .reporting import report, select_mode
from .routes import RouteTableError
from .scanner import DeadScanner

def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_scan_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="*",
        help="Directories to scan (defaults depend on the analyzer).",
    )
    parser.add_argument(
        "--dump-output",
        action="store_true",
        help="Print the raw result mapping as JSON.",
    )
    parser.add_argument(
        "--text-output",
        action="store_true",
        help="Print a plain list of names.",
    )
    parser.add_argument(
        "--project",
        default=".",
        help="Laravel project root holding .deadscan.yml and artisan (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deadscan",
        description="Report classes and methods in a Laravel application that look unused.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for rules in discover_analyzers():
        sub = subparsers.add_parser(
            rules.name, help=rules.description or f"Run the {rules.name} analyzer."
        )
        _add_verbose_option(sub, suppress_default=True)
        _add_scan_options(sub)
        if rules.uses_routes:
            sub.add_argument(
                "--routes",
                type=Path,
                default=None,
                help="JSON route table (output of `php artisan route:list --json`).",
            )
            sub.add_argument(
                "--no-artisan",
                action="store_true",
                help="Do not call `php artisan route:list` to read routes.",
            )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for deadscan commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            verbose=bool(args.verbose),
            quiet=bool(args.dump_output or args.text_output),
            log_file=args.log_file,
        )
        config = load_config(Path(args.project))
        rules = get_analyzer(args.command, config)
        scanner = DeadScanner(config=config)
        result = scanner.run(
            rules,
            args.paths,
            project=config.root,
            routes_file=getattr(args, "routes", None),
            use_artisan=False if getattr(args, "no_artisan", False) else None,
        )
    except (ConfigError, RouteTableError) as exc:
        parser.exit(1, f"{exc}\n")
    except (OSError, re.error) as exc:
        parser.exit(1, f"deadscan {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    mode = select_mode(dump_output=args.dump_output, text_output=args.text_output)
    report(result, mode, label=rules.label)


if __name__ == "__main__":
    main(sys.argv[1:])
