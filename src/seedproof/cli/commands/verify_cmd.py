from __future__ import annotations

import argparse

from rich.panel import Panel
from rich.table import Table

from seedproof.application.services.verification_service import VerificationService
from seedproof.cli.context import CLIContext
from seedproof.core.errors import ValidationError
from seedproof.domain.models.verification import VerificationResult


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("verify", help="Check a revealed seed against its commitment")
    parser.add_argument("--hash", dest="seed_hash", required=True, help="Published commitment hash (hex)")
    parser.add_argument("--seed", required=True, help="Revealed seed (hex)")
    parser.add_argument("--rows", required=True, help="Comma-separated outcome count per row, e.g. 6,5,4")
    parser.add_argument("--json", action="store_true", help="Print the verification record as JSON")
    parser.add_argument(
        "--lenient-bounds",
        action="store_true",
        help="Do not clamp the boundary draw; reproduces unclamped historical output",
    )
    parser.add_argument(
        "--no-row-limit",
        action="store_true",
        help="Accept rows larger than the configured maximum outcome count",
    )
    parser.set_defaults(handler=run)


def _service(args: argparse.Namespace, ctx: CLIContext) -> VerificationService:
    strict = ctx.settings.strict_bounds and not args.lenient_bounds
    return VerificationService(strict=strict)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    service = _service(args, ctx)
    max_outcome_space = None if args.no_row_limit else ctx.settings.max_outcome_space

    try:
        result = service.verify_raw(args.seed_hash, args.seed, args.rows, max_outcome_space=max_outcome_space)
    except ValidationError as exc:
        if args.json:
            ctx.console.print_json(data={"errors": exc.problems})
        else:
            for problem in exc.problems:
                ctx.console.print(f"[red]Invalid input[/red] {problem}")
        return 1

    if args.json:
        ctx.console.print_json(data=result.to_dict())
        return 0 if result.seed_valid else 1

    _print_summary(result, ctx)
    if ctx.debug:
        ctx.console.print_json(data=result.to_dict())
    return 0 if result.seed_valid else 1


def _print_summary(result: VerificationResult, ctx: CLIContext) -> None:
    status = "[green]PASSED[/green]" if result.seed_valid else "[red]FAILED[/red]"
    lines = [
        f"Status: {status}",
        f"Commitment: {result.request.commitment_hash}",
        f"Computed: {result.computed_hash or '-'}",
        f"Rows: {result.round_count}",
        f"Total tiles: {result.total_outcome_space}",
        f"Outcomes: {','.join(str(i) for i in result.outcome_indices)}",
    ]
    ctx.console.print(Panel.fit("\n".join(lines), title="Verify Seed"))

    if not result.seed_valid:
        ctx.console.print(
            "[yellow]The seed does not match the commitment. "
            "Outcomes below show what this seed would produce.[/yellow]"
        )

    table = Table(title="Reconstructed Rows")
    table.add_column("Row", justify="right")
    table.add_column("Tiles", justify="right")
    table.add_column("Index", justify="right")
    table.add_column("Draw", justify="right")
    table.add_column("Note")
    for outcome in result.rounds:
        note = "fallback" if outcome.fallback else ("clamped" if outcome.clamped else "")
        table.add_row(
            str(outcome.round_index + 1),
            str(outcome.outcome_space),
            str(outcome.index),
            f"{outcome.ratio:.3f}",
            note,
        )
    ctx.console.print(table)
