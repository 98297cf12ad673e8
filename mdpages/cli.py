"""CLI entrypoints for mdpages commands."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, MdPagesOptions, load_config
from .discovery import FilesystemDiscoveryService
from .generator import PageGenerator
from .logging import configure_logging


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default: object = argparse.SUPPRESS if suppress_default else False
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Increase log verbosity for troubleshooting.",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only report warnings and errors on the console.",
    )


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    _add_verbosity_options(parser, suppress_default=True)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .mdpages.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--base-route",
        dest="base_route",
        default=None,
        help="Prefix applied to generated routes (for example, 'docs').",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdpages",
        description="Generate routable pages from markdown documents.",
    )
    _add_verbosity_options(parser)
    parser.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write DEBUG-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Write one page artifact per markdown document.",
    )
    _add_common_options(generate_parser)
    generate_parser.add_argument("source", help="Directory containing markdown documents.")
    generate_parser.add_argument("output", help="Directory that receives generated pages.")

    routes_parser = subparsers.add_parser(
        "routes",
        help="List filename-derived routes for markdown documents.",
    )
    _add_common_options(routes_parser)
    routes_parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Directory containing markdown documents (defaults to the configured source).",
    )
    routes_parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Only list documents directly inside the source directory.",
    )
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the route map as a JSON object.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the discovery HTTP service.",
    )
    _add_common_options(serve_parser)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    serve_parser.add_argument(
        "--source",
        default=None,
        help="Directory containing markdown documents (defaults to the configured source).",
    )

    return parser


def _load_options(args: argparse.Namespace, source: str | None) -> MdPagesOptions:
    options = load_config(Path(args.config)) if args.config else MdPagesOptions()
    overrides: dict[str, object] = {}
    if source:
        overrides["source_directory"] = source
    if args.base_route:
        overrides["base_route_path"] = args.base_route
    if getattr(args, "no_recursive", False):
        overrides["search_recursively"] = False
    return replace(options, **overrides) if overrides else options


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdpages commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    if args.command == "generate":
        try:
            options = _load_options(args, args.source)
            options.validate()
            report = PageGenerator(options).generate(args.source, args.output)
        except ConfigError as exc:
            parser.exit(1, f"mdpages generate failed: {exc}\n")
        print(f"Generated {len(report.generated)} page(s) into {_relativize(Path(args.output))}")
        if not report.ok:
            parser.exit(
                1,
                f"{len(report.failed)} document(s) failed. Run with --verbose for more details.\n",
            )
    elif args.command == "routes":
        try:
            options = _load_options(args, args.source)
            discovery = FilesystemDiscoveryService(options)
        except ConfigError as exc:
            parser.exit(1, f"mdpages routes failed: {exc}\n")
        routes = discovery.discover_with_routes()
        if args.json:
            print(json.dumps(routes, indent=2, sort_keys=True))
        else:
            for name in sorted(routes):
                print(f"{name} -> {routes[name]}")
    elif args.command == "serve":
        from .service import run_service

        try:
            options = _load_options(args, args.source)
            options.validate()
        except ConfigError as exc:
            parser.exit(1, f"mdpages serve failed: {exc}\n")
        run_service(args.host, args.port, options=options)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
