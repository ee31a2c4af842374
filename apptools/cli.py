#!/usr/bin/env python3
"""
CLI Entry Point — create or inspect a project from the terminal
================================================================
Usage:
    apptools create com.example.foo            # creates ./com.example.foo/{app,log,pkg,prj}
    apptools create com.example.foo --dir /work
    apptools info                              # run from INSIDE the project root
    apptools info --dir /work/com.example.foo

Note the asymmetry: `create` takes the directory the project is created in,
`info` takes the project root itself.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .application import Application
from .config import get_config
from .exceptions import AppToolsError
from .terminal import TerminalOutput


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


def _resolve_dir(raw: str) -> str:
    """--dir may be relative on the command line; Application wants it absolute."""
    return os.path.normpath(os.path.abspath(raw)) if raw else os.getcwd()


def cmd_create(args) -> None:
    """Handle 'create': make a new project below --dir (default: cwd)."""
    app = Application(_resolve_dir(args.dir), args.package_id)
    app.output.highlight(f"Project {app.package_id} created")
    app.output.info("Root:", str(app.root_path))


def cmd_info(args) -> None:
    """Handle 'info': load the project whose root is --dir (default: cwd)."""
    app = Application(_resolve_dir(args.dir))
    app.output.highlight(f"Project {app.package_id}")
    for label, path in (
        ("root", app.root_path),
        ("app", app.app_path),
        ("log", app.log_path),
        ("pkg", app.pkg_path),
        ("prj", app.prj_path),
    ):
        app.output.info(f"{label:<5}", str(path))
    app.output.info("platform", app.config.platform)


def _create_subparsers(subparsers) -> None:
    """Register the 'create' subcommand on the given subparsers action."""
    cp = subparsers.add_parser(
        "create",
        help="Create a new project directory named after PACKAGE_ID",
    )
    cp.add_argument(
        "package_id",
        metavar="PACKAGE_ID",
        help="Package ID in reverse host format, e.g. com.example.foo",
    )
    cp.add_argument(
        "--dir", "-d",
        default="",
        help="Directory to create the project in (default: current directory)",
    )
    cp.set_defaults(func=cmd_create)


def _info_subparsers(subparsers) -> None:
    """Register the 'info' subcommand."""
    ip = subparsers.add_parser(
        "info",
        help="Show the paths of an existing project",
    )
    ip.add_argument(
        "--dir", "-d",
        default="",
        help="The project's root directory (default: current directory)",
    )
    ip.set_defaults(func=cmd_info)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apptools",
        description="Create and inspect application projects",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only print errors")

    subparsers = parser.add_subparsers(dest="subcommand", metavar="SUBCOMMAND")
    _create_subparsers(subparsers)
    _info_subparsers(subparsers)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=True)  # override=True: .env values win over empty system env vars

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.subcommand is None:
        parser.print_help()
        return 2

    try:
        config = get_config()
        setup_logging(args.verbose or config.verbose)
        TerminalOutput.get_instance().quiet = args.quiet or config.quiet
        args.func(args)
    except (AppToolsError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
