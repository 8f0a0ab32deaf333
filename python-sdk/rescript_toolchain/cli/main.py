"""
Main entry point for the rescript-toolchain CLI.

Provides the argument parser and main function.
"""

import argparse
import os
import sys
from typing import Any, List, Optional

from dotenv import load_dotenv

from .. import __version__
from ..binary import BinaryName
from ..config import ResolverConfig
from ..logger import set_verbose
from .commands import cmd_find, cmd_monorepo_root, cmd_targets


def _add_args(parser: argparse.ArgumentParser, specs: List[Any]) -> None:
    """Add arguments from spec list.
    Spec: (pos, help?) | (long, short?, dest, default, help) | (long, short?, "store_true", help) for flag.
    """
    for s in specs:
        if len(s) in (1, 2) and not s[0].startswith("-"):
            parser.add_argument(s[0], help=s[1] if len(s) == 2 else None)
        elif len(s) == 5:
            parser.add_argument(s[0], *(s[1],) if s[1] else (), dest=s[2], default=s[3], help=s[4])
        elif len(s) == 4:
            parser.add_argument(s[0], *(s[1],) if s[1] else (), action="store_true", help=s[3])


_BINARY_CHOICES = ", ".join(b.value for b in BinaryName)

# Config-driven subcommands: (name, help, func, arg_specs)
_SUBCOMMANDS = [
    ("find", "Print the path of a toolchain binary", cmd_find, [
        ("binary", f"Binary to locate ({_BINARY_CHOICES})"),
        ("--project-root", "-p", "project_root", None, "Project directory (default: current directory)"),
        ("--platform-path", None, "platform_path", None, "Directory with the native binaries (skips discovery)"),
        ("--json", None, "store_true", "Output as JSON"),
    ]),
    ("monorepo-root", "Print the directory owning the node_modules of a binary path", cmd_monorepo_root, [
        ("binary_path", "Path returned by `find`"),
    ]),
    ("targets", "List platform packages and the detected host", cmd_targets, [
        ("--json", None, "store_true", "Output as JSON"),
    ]),
]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rescript-toolchain",
        description="Locate the binaries of an installed ReScript toolchain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rescript-toolchain find bsc.exe                     Compiler for the current project
  rescript-toolchain find rescript -p packages/app    JS wrapper for a subpackage
  rescript-toolchain monorepo-root /repo/node_modules/.bin/rescript
  rescript-toolchain targets                          Show host platform info

Environment:
  RESCRIPT_PLATFORM_PATH       Directory with the native binaries
  RESCRIPT_TOOLCHAIN_VERBOSE   Log every resolution step
        """
    )
    parser.add_argument("-V", "--version", action="store_true", help="Show version information")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every resolution step")
    parser.add_argument("--env-file", dest="env_file", default=None, help="Load environment from a .env file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text, func, specs in _SUBCOMMANDS:
        p = subparsers.add_parser(name, help=help_text)
        _add_args(p, specs)
        p.set_defaults(func=func)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"rescript-toolchain {__version__}")
        return 0

    if args.env_file:
        load_dotenv(args.env_file, override=False)
    if args.verbose or ResolverConfig.from_env().verbose:
        set_verbose(True)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "find":
        args.project_root = os.path.abspath(args.project_root or os.getcwd())

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
