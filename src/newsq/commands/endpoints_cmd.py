from __future__ import annotations

import argparse
import time

from newsq.cli_support import envelope_and_exit, wants_json, wants_plain
from newsq.errors import ExitCode
from newsq.news.query import Endpoint
from newsq.output import EnvelopeMeta


def register(
    subparsers: argparse._SubParsersAction, *, parents: list[argparse.ArgumentParser]
) -> None:
    p = subparsers.add_parser("endpoints", parents=parents, help="List NewsAPI endpoints")
    p.set_defaults(_handler=run)


def run(*, args: argparse.Namespace, start: float, warnings: list[str]) -> int:
    endpoints = [
        {"id": e.id, "base_url": e.base_url, "filters": e.filters} for e in Endpoint
    ]

    if wants_plain(args):
        for item in endpoints:
            print(item["id"])
        return ExitCode.OK

    if not wants_json(args):
        for item in endpoints:
            print(f"{item['id']}: {item['base_url']} ({item['filters']} filters)")
        return ExitCode.OK

    meta = EnvelopeMeta(duration_ms=int((time.time() - start) * 1000))
    return envelope_and_exit(
        args=args,
        command="endpoints",
        ok=True,
        data={"endpoints": endpoints},
        warnings=warnings,
        error=None,
        meta=meta,
    )
