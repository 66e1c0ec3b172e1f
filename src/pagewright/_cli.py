"""Pagewright CLI — pagewright generate / pagewright check / pagewright watch.

Entry point for the ``pagewright`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every command.

    Defaults are ``None`` so unset flags fall through to the config file.
    """
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--pages-dir", default=None, help="Pages directory (default: pages)")
    parser.add_argument(
        "--output", default=None, help="Generated module path (default: pages_generated.py)",
    )
    parser.add_argument("--home", default=None, help="Route path views link back to (default: /)")
    parser.add_argument(
        "--route",
        action="append",
        default=None,
        dest="routes",
        metavar="PATH=NAME",
        help="Predefined route, e.g. '/=Home' or '/:..segments=NotFound(segments)'; repeatable",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the pagewright CLI."""
    parser = argparse.ArgumentParser(
        prog="pagewright",
        description="Generate a routes module from a directory of page files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # pagewright generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Discover pages and write the routes module",
    )
    _add_common_arguments(generate_parser)
    generate_parser.add_argument(
        "--verbose", "-v", action="store_true", default=None, help="List every page",
    )

    # pagewright check
    check_parser = subparsers.add_parser(
        "check",
        help="Exit non-zero if the routes module is out of date",
    )
    _add_common_arguments(check_parser)

    # pagewright watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Regenerate the routes module whenever pages change",
    )
    _add_common_arguments(watch_parser)
    watch_parser.add_argument(
        "--verbose", "-v", action="store_true", default=None, help="List every page",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from pagewright import __version__

    return __version__


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    """Config overrides from parsed arguments; unset flags stay ``None``."""
    return {
        "pages_dir": args.pages_dir,
        "output": args.output,
        "home": args.home,
        "routes": args.routes,
        "verbose": getattr(args, "verbose", None),
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from pagewright._errors import PagewrightError
    from pagewright.generator import check, generate
    from pagewright.report import print_error
    from pagewright.watcher import watch

    overrides = _overrides(args)
    try:
        if args.command == "generate":
            generate(args.root, **overrides)
        elif args.command == "check":
            if not check(args.root, **overrides):
                sys.exit(1)
        elif args.command == "watch":
            watch(args.root, **overrides)
    except PagewrightError as exc:
        print_error(exc)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
