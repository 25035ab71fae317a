"""Menu commands for the receipt ledger."""

from __future__ import annotations

from pos.application.clear_receipts import ClearReceiptsHandler
from pos.application.list_receipts import ListReceiptsHandler
from pos.infrastructure.bootstrap import AppState
from pos.infrastructure.cli.console import ACCENT, SUCCESS, WARNING, Console
from pos.infrastructure.cli.result import CommandResult


def view_receipts(app: AppState, console: Console) -> CommandResult:
    console.echo()
    console.echo("--- Receipt List ---", SUCCESS)
    receipts = ListReceiptsHandler(app.receipts, app.products).handle()

    if not receipts:
        console.echo("No receipts available.", WARNING)
        return CommandResult.ok()

    for dto in receipts:
        console.echo()
        console.echo(f"Receipt ID: {dto.id}", ACCENT)
        console.echo(f"Customer: {dto.customer_name} (ID: {dto.customer_id})")
        for line in dto.lines:
            console.echo(
                f"  {line.product_name} x{line.quantity}",
                WARNING if line.missing else None,
            )
        console.echo(f"  Total: {dto.total}")
        console.echo(f"  Timestamp: {dto.timestamp}")
    return CommandResult.ok()


def clear_receipts(app: AppState, console: Console) -> CommandResult:
    removed = ClearReceiptsHandler(app.receipts).handle()
    return CommandResult.ok(f"Receipts cleared successfully ({removed} removed).")
