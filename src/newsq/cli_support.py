from __future__ import annotations

import argparse
import os
import sys

from newsq import __version__
from newsq.errors import ExitCode, NewsqError
from newsq.news.client import API_KEY_ENV, NewsApiClient
from newsq.output import EnvelopeMeta, make_envelope, print_json


def wants_json(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "json", False) or getattr(args, "pretty", False))


def wants_plain(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "plain", False) and not wants_json(args))


def add_global_flags(parser: argparse.ArgumentParser, *, suppress_defaults: bool) -> None:
    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    parser.add_argument(
        "--json",
        action="store_true",
        default=default(False),
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=default(False),
        help="Pretty-print JSON (implies --json)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=default(False),
        help="Stable text output for piping",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=default(False),
        help="Verbose diagnostics to stderr",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=default(15.0),
        help="Network timeout in seconds",
    )
    parser.add_argument(
        "--proxy",
        type=str,
        default=default(None),
        help="HTTP(S) proxy URL",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=default(None),
        help=f"NewsAPI key (default: ${API_KEY_ENV})",
    )


def client_from_args(args: argparse.Namespace) -> NewsApiClient:
    api_key = getattr(args, "api_key", None) or os.environ.get(API_KEY_ENV, "")
    return NewsApiClient(api_key, timeout=float(args.timeout), proxy=args.proxy)


def print_warnings(args: argparse.Namespace, warnings: list[str]) -> None:
    if wants_json(args) or not getattr(args, "verbose", False):
        return
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)


def envelope_and_exit(
    *,
    args: argparse.Namespace,
    command: str,
    ok: bool,
    data: object,
    warnings: list[str],
    error: NewsqError | None,
    meta: EnvelopeMeta,
) -> int:
    payload = make_envelope(
        ok=ok,
        command=command,
        version=__version__,
        data=data,
        warnings=warnings,
        error=None if error is None else error.to_error_dict(),
        meta=meta,
    )
    if wants_json(args):
        print_json(payload, pretty=bool(getattr(args, "pretty", False)))
    return ExitCode.OK if ok else (error.exit_code if error is not None else ExitCode.RUNTIME_ERROR)
