from __future__ import annotations

import argparse

from seedproof.cli.context import CLIContext
from seedproof.web.app import create_app


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("web", help="Serve the verification HTTP API")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    try:
        import uvicorn
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("uvicorn is required for web mode. Install project dependencies.") from exc

    app = create_app(ctx.settings)
    uvicorn.run(
        app,
        host=args.host or ctx.settings.host,
        port=args.port or ctx.settings.port,
        log_level=ctx.settings.log_level.lower(),
    )
    return 0
