from __future__ import annotations

import argparse

from seedproof.application.services.commitment_service import compute_commitment
from seedproof.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("commit", help="Print the Keccak-256 commitment of a seed")
    parser.add_argument("--seed", required=True, help="Seed (hex)")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    ctx.console.print(compute_commitment(args.seed), highlight=False)
    return 0
