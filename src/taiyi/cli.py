"""Taiyi Python CLI."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import sys

from taiyi.access import load_access
from taiyi.client import TaiyiClient
from taiyi.constants import DEFAULT_DOMAIN_NAME, SDK_VERSION
from taiyi.errors import TaiyiError


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--access", default=None, help="Access record JSON file")
    parser.add_argument("--host", default=os.environ.get("TAIYI_HOST", ""))
    # String defaults go through type=int, so a bad TAIYI_PORT is reported like a bad --port.
    parser.add_argument("--port", type=int, default=os.environ.get("TAIYI_PORT") or None)
    parser.add_argument("--domain", default=os.environ.get("TAIYI_DOMAIN") or DEFAULT_DOMAIN_NAME)
    parser.add_argument("--json", action="store_true")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taiyi", description="Taiyi CLI")
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("version", help="Print the SDK version")

    status_parser = subparsers.add_parser("status", help="Show chain status of a domain")
    _add_connection_arguments(status_parser)

    schemas_parser = subparsers.add_parser("schemas", help="List schemas of a domain")
    _add_connection_arguments(schemas_parser)
    schemas_parser.add_argument("--offset", type=int, default=0)
    schemas_parser.add_argument("--limit", type=int, default=20)

    return parser


def _connect(args: argparse.Namespace) -> TaiyiClient:
    client = TaiyiClient(load_access(args.access))
    client.connect_to_domain(args.host, args.port, args.domain)
    client.activate()
    return client


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.command == "version":
        print(SDK_VERSION)
        return 0

    if args.port is None:
        parser.error("--port is required (or set TAIYI_PORT)")

    if args.command == "status":
        status = _connect(args).get_status()
        if args.json:
            print(json.dumps({"command": "status", **dataclasses.asdict(status)}, sort_keys=True))
            return 0
        print(f"world version: {status.world_version}")
        print(f"block height: {status.block_height}")
        print(f"previous block: {status.previous_block}")
        print(f"genesis block: {status.genesis_block}")
        print(f"allocated transaction id: {status.allocated_transaction_id}")
        return 0

    if args.command == "schemas":
        result = _connect(args).query_schemas(args.offset, args.limit)
        if args.json:
            print(json.dumps({"command": "schemas", **dataclasses.asdict(result)}, sort_keys=True))
            return 0
        if not result.schemas:
            print("No schemas found.")
            return 0
        for schema in result.schemas:
            print(schema.get("name", schema) if isinstance(schema, dict) else schema)
        print(f"{len(result.schemas)} of {result.total} schemas (offset {result.offset})")
        return 0

    parser.print_help()
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        return _run(parser, args)
    except TaiyiError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
