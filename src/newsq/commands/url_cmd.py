from __future__ import annotations

import argparse
import time

from newsq.cli_support import envelope_and_exit, print_warnings, wants_json
from newsq.commands.support import ALL_GROUPS, add_filter_args, query_from_args
from newsq.errors import ExitCode
from newsq.news.query import build_query_url, resolve_endpoint
from newsq.output import EnvelopeMeta


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    p = subparsers.add_parser(
        "url", parents=parents, help="Build a query URL without sending it"
    )
    p.set_defaults(_handler=run)
    p.add_argument("endpoint", type=str, help="everything, top-headlines or sources")
    add_filter_args(p, groups=ALL_GROUPS)


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    endpoint = resolve_endpoint(str(args.endpoint))
    url = build_query_url(endpoint, query_from_args(args), warnings=warnings)

    if not wants_json(args):
        print_warnings(args, warnings)
        print(url)
        return ExitCode.OK

    meta = EnvelopeMeta(
        duration_ms=int((time.time() - start) * 1000), endpoint=endpoint.id, url=url
    )
    return envelope_and_exit(
        args=args,
        command="url",
        ok=True,
        data={"url": url},
        warnings=warnings,
        error=None,
        meta=meta,
    )
