"""CLI entry point for the file system cache."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, List, Optional

from file_system_cache.adapters.storage.cache import FileSystemCache
from file_system_cache.core.errors import FileSystemCacheError

LOG_LEVEL = os.getenv("FILE_SYSTEM_CACHE_LOG_LEVEL", "WARNING")


def parse_value(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="File system cache CLI")
    parser.add_argument("--base-path", type=str, default=None, help="Cache directory (default: ./.cache)")
    parser.add_argument("--ns", type=str, nargs="*", default=None, help="Namespace value(s)")
    parser.add_argument("--extension", type=str, default=None, help="File extension for cache files")
    parser.add_argument("--hash", type=str, default=None, help="Hash algorithm (default: sha1)")
    parser.add_argument("--ttl", type=float, default=None, help="Default time-to-live in seconds")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    commands = parser.add_subparsers(dest="command", required=True)

    path_cmd = commands.add_parser("path", help="Print the file path for a key")
    path_cmd.add_argument("key")

    get_cmd = commands.add_parser("get", help="Print the cached value for a key as JSON")
    get_cmd.add_argument("key")
    get_cmd.add_argument("--default", type=parse_value, default=None, help="JSON value returned on a miss")

    set_cmd = commands.add_parser("set", help="Store a value (parsed as JSON, else a string)")
    set_cmd.add_argument("key")
    set_cmd.add_argument("value", type=parse_value)
    set_cmd.add_argument("--ttl", dest="entry_ttl", type=float, default=None, help="Time-to-live for this entry")

    remove_cmd = commands.add_parser("remove", help="Delete the entry for a key")
    remove_cmd.add_argument("key")

    commands.add_parser("clear", help="Delete every entry in the namespace")
    commands.add_parser("list", help="Print every live entry in the namespace as JSON lines")
    return parser


async def run(cache: FileSystemCache, args: argparse.Namespace) -> List[str]:
    if args.command == "path":
        return [str(cache.path(args.key))]
    if args.command == "get":
        value = await cache.get(args.key, args.default)
        return [json.dumps(value, default=str)]
    if args.command == "set":
        result = await cache.set(args.key, args.value, args.entry_ttl)
        return [str(result.path)]
    if args.command == "remove":
        await cache.remove(args.key)
        return []
    if args.command == "clear":
        await cache.clear()
        return []
    loaded = await cache.load()
    return [json.dumps({"path": str(item.path), "value": item.value}, default=str) for item in loaded.files]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cache = FileSystemCache(
            base_path=args.base_path,
            ns=args.ns,
            extension=args.extension,
            hash=args.hash,
            ttl=args.ttl,
        )
        lines = asyncio.run(run(cache, args))
    except (FileSystemCacheError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
