from __future__ import annotations

import argparse
import sys
import time

import newsq.cli_support as cli_support
from newsq.cli_support import envelope_and_exit, print_warnings, wants_json, wants_plain
from newsq.commands.support import add_filter_args, groups_for, query_from_args
from newsq.errors import ExitCode, NewsqError
from newsq.news.query import Endpoint, build_query_url
from newsq.output import EnvelopeMeta


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    p = subparsers.add_parser("sources", parents=parents, help="List news publishers")
    p.set_defaults(_handler=run)
    add_filter_args(p, groups=groups_for(Endpoint.SOURCES))


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    client = cli_support.client_from_args(args)
    url = build_query_url(Endpoint.SOURCES, query_from_args(args), warnings=warnings)
    result = client.get_sources(url)

    print_warnings(args, warnings)

    if wants_plain(args):
        for s in result.sources:
            print(s.id or s.name or "")
        return ExitCode.OK if result.sources else ExitCode.NOT_FOUND

    meta = EnvelopeMeta(
        duration_ms=int((time.time() - start) * 1000), endpoint=Endpoint.SOURCES.id, url=url
    )
    if not result.sources:
        if not wants_json(args):
            print("no sources", file=sys.stderr)
            return ExitCode.NOT_FOUND
        err = NewsqError(code="not_found", message="no sources", exit_code=ExitCode.NOT_FOUND)
        return envelope_and_exit(
            args=args,
            command="sources",
            ok=False,
            data=result.to_dict(),
            warnings=warnings,
            error=err,
            meta=meta,
        )

    if not wants_json(args):
        for s in result.sources:
            print(f"{s.id}: {s.name} [{s.category or '-'}/{s.language or '-'}/{s.country or '-'}]")
        return ExitCode.OK

    return envelope_and_exit(
        args=args,
        command="sources",
        ok=True,
        data=result.to_dict(),
        warnings=warnings,
        error=None,
        meta=meta,
    )
