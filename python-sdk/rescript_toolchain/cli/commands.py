"""
CLI commands — find, monorepo-root, targets.
"""

import argparse
import json
import sys

from ..binary import (
    PLATFORM_PACKAGES_VERSION,
    TARGET_PACKAGES,
    FindBinaryOptions,
    detect_host,
    find_binary_sync,
    get_monorepo_root_from_binary_path,
)
from ..config import ResolverConfig


def cmd_find(args: argparse.Namespace) -> int:
    config = ResolverConfig.from_env().with_overrides(platform_path=args.platform_path)
    try:
        options = FindBinaryOptions(
            project_root_path=args.project_root,
            binary=args.binary,
            platform_path=config.platform_path,
        )
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    path = find_binary_sync(options)
    if getattr(args, "json", False):
        print(json.dumps({
            "binary": options.binary.value,
            "path": path,
            "monorepo_root": get_monorepo_root_from_binary_path(path),
        }, indent=2))
        return 0 if path else 1

    if path is None:
        print(
            f"{options.binary.value} not found. Is rescript installed? Try reinstalling dependencies.",
            file=sys.stderr,
        )
        return 1
    print(path)
    return 0


def cmd_monorepo_root(args: argparse.Namespace) -> int:
    root = get_monorepo_root_from_binary_path(args.binary_path)
    if root is None:
        print(f"No node_modules segment in {args.binary_path}", file=sys.stderr)
        return 1
    print(root)
    return 0


def cmd_targets(args: argparse.Namespace) -> int:
    host = detect_host()
    supported = host.target in TARGET_PACKAGES
    if getattr(args, "json", False):
        print(json.dumps({
            "host": host.target,
            "supported": supported,
            "legacy_dirs": host.legacy_dirs,
            "targets": TARGET_PACKAGES,
        }, indent=2))
        return 0

    print(f"Host: {host.target} ({'supported' if supported else 'unsupported'} for rescript >= {PLATFORM_PACKAGES_VERSION})")
    print(f"Legacy directories: {', '.join(host.legacy_dirs)}")
    print("Platform packages:")
    for target, package in sorted(TARGET_PACKAGES.items()):
        marker = "*" if target == host.target else " "
        print(f"  {marker} {target:<14} {package}")
    return 0
