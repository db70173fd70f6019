"""
Call a service from the terminal:
- get / post / put / delete a url and print the JSON answer
- upload a local file as a multipart form

Exit codes: 0 on success, 1 when the service answers with its error envelope,
2 on configuration, transport or decoding failures.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv

from service_fetch.integrations.clients.real_http.fetch import FetchClient
from service_fetch.integrations.contracts.fetch import UploadFile
from service_fetch.integrations.policy.response_wrappers import ServiceReportedError
from service_fetch.utils.config_loader import load_fetch_config

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _key_value(raw: str) -> tuple:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return key, value


def _json_body(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON body: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="service-fetch", description="Call a service and print its JSON answer")
    parser.add_argument("--config", help="YAML config file (defaults to $SERVICE_FETCH_CONFIG)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="GET a url")
    get.add_argument("url")
    get.add_argument("-p", "--param", dest="params", action="append", type=_key_value, default=None,
                     help="Query parameter as key=value (repeatable)")

    for name in ("post", "put"):
        cmd = sub.add_parser(name, help=f"{name.upper()} a JSON body")
        cmd.add_argument("url")
        cmd.add_argument("--json", dest="body", type=_json_body, default={}, help="JSON body")

    delete = sub.add_parser("delete", help="DELETE a url")
    delete.add_argument("url")

    upload = sub.add_parser("upload", help="Upload a local file as multipart/form-data")
    upload.add_argument("url")
    upload.add_argument("path")
    upload.add_argument("--mimetype", default=None)
    upload.add_argument("--encoding", default="7bit")
    return parser


async def run_command(client: FetchClient, args: argparse.Namespace) -> Any:
    if args.command == "get":
        params: Optional[Dict[str, str]] = dict(args.params) if args.params else None
        return await client.get(args.url, params)
    if args.command == "post":
        return await client.post(args.url, args.body)
    if args.command == "put":
        return await client.put(args.url, args.body)
    if args.command == "delete":
        return await client.delete(args.url)
    file = UploadFile.from_path(args.path, encoding=args.encoding, mimetype=args.mimetype)
    return await client.upload(args.url, file)


def main(argv: Optional[List[str]] = None, client: Optional[FetchClient] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if client is None:
        try:
            config = load_fetch_config(args.config)
        except (ValueError, OSError) as e:
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 2
        client = FetchClient(config=config)

    try:
        result = asyncio.run(run_command(client, args))
    except ServiceReportedError as e:
        print(json.dumps(e.output, indent=2, default=str), file=sys.stderr)
        return 1
    except (httpx.HTTPError, ValueError, OSError) as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
