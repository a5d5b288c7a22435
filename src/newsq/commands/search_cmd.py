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

_COMMANDS: dict[str, tuple[Endpoint, str]] = {
    "everything": (Endpoint.EVERYTHING, "Search all articles"),
    "headlines": (Endpoint.TOP_HEADLINES, "Search top headlines"),
}


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    for name, (endpoint, help_text) in _COMMANDS.items():
        p = subparsers.add_parser(name, parents=parents, help=help_text)
        p.set_defaults(_handler=run, _endpoint=endpoint)
        add_filter_args(p, groups=groups_for(endpoint))


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    endpoint: Endpoint = args._endpoint
    client = cli_support.client_from_args(args)
    url = build_query_url(endpoint, query_from_args(args), warnings=warnings)
    result = client.get_news(url)
    articles = result.articles

    print_warnings(args, warnings)

    if wants_plain(args):
        for a in articles:
            if a.url:
                print(a.url)
        return ExitCode.OK if articles else ExitCode.NOT_FOUND

    meta = EnvelopeMeta(
        duration_ms=int((time.time() - start) * 1000), endpoint=endpoint.id, url=url
    )
    if not articles:
        if not wants_json(args):
            print("no results", file=sys.stderr)
            return ExitCode.NOT_FOUND
        err = NewsqError(code="not_found", message="no results", exit_code=ExitCode.NOT_FOUND)
        return envelope_and_exit(
            args=args,
            command=str(args.command),
            ok=False,
            data=result.to_dict(),
            warnings=warnings,
            error=err,
            meta=meta,
        )

    if not wants_json(args):
        for idx, a in enumerate(articles, start=1):
            print(f"{idx}. {a.title or '(untitled)'}")
            if a.url:
                print(f"   {a.url}")
            if a.description:
                print(f"   {a.description}")
        return ExitCode.OK

    return envelope_and_exit(
        args=args,
        command=str(args.command),
        ok=True,
        data=result.to_dict(),
        warnings=warnings,
        error=None,
        meta=meta,
    )
