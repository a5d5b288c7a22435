from __future__ import annotations

import argparse
import sys
import time

from newsq import __version__
from newsq.cli_support import add_global_flags, envelope_and_exit, wants_json
from newsq.commands import endpoints_cmd, search_cmd, sources_cmd, url_cmd
from newsq.errors import NewsqError
from newsq.output import EnvelopeMeta


def build_parser() -> argparse.ArgumentParser:
    global_root = argparse.ArgumentParser(add_help=False)
    add_global_flags(global_root, suppress_defaults=False)

    global_sub = argparse.ArgumentParser(add_help=False)
    add_global_flags(global_sub, suppress_defaults=True)

    parser = argparse.ArgumentParser(prog="newsq", parents=[global_root], add_help=True)
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    for module in (endpoints_cmd, url_cmd, search_cmd, sources_cmd):
        module.register(subparsers, parents=[global_sub])

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    command = str(args.command)
    start = time.time()
    warnings: list[str] = []

    try:
        return int(args._handler(args=args, start=start, warnings=warnings))
    except NewsqError as e:
        meta = EnvelopeMeta(duration_ms=int((time.time() - start) * 1000))
        if wants_json(args):
            return envelope_and_exit(
                args=args,
                command=command,
                ok=False,
                data={},
                warnings=warnings,
                error=e,
                meta=meta,
            )
        print(f"error: {e.message}", file=sys.stderr)
        if e.details and args.verbose:
            print(f"details: {e.details}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
