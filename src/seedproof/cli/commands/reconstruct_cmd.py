from __future__ import annotations

import argparse

from seedproof.application.services.normalization_service import parse_round_config, row_limit_problem
from seedproof.application.services.reconstruction_service import reconstruct
from seedproof.cli.context import CLIContext
from seedproof.core.errors import ValidationError
from seedproof.core.hexcodec import decode_hex


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("reconstruct", help="Derive per-row outcome indices from a seed")
    parser.add_argument("--seed", required=True, help="Revealed seed (hex)")
    parser.add_argument("--rows", required=True, help="Comma-separated outcome count per row")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--lenient-bounds", action="store_true")
    parser.add_argument("--no-row-limit", action="store_true")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    seed = args.seed.strip().lower()
    decode_hex(seed)
    rows = parse_round_config(args.rows)
    if not rows:
        raise ValidationError("Row configuration is required")
    if not args.no_row_limit:
        limit_problem = row_limit_problem(rows, ctx.settings.max_outcome_space)
        if limit_problem:
            raise ValidationError(limit_problem)

    strict = ctx.settings.strict_bounds and not args.lenient_bounds
    indices = reconstruct(seed, rows, strict=strict)

    if args.json:
        ctx.console.print_json(data={"row_config": list(rows), "outcome_indices": indices})
    else:
        ctx.console.print(",".join(str(i) for i in indices))
    return 0
