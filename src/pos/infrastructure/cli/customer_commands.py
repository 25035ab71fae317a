"""Menu commands for the customer directory."""

from __future__ import annotations

from pos.application.add_customer import AddCustomerHandler
from pos.application.list_customers import ListCustomersHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import AppState
from pos.infrastructure.cli.console import ACCENT, SUCCESS, WARNING, Console
from pos.infrastructure.cli.result import CommandResult


def show_customers(app: AppState, console: Console) -> None:
    console.echo()
    console.echo("--- Customer List ---", SUCCESS)
    customers = ListCustomersHandler(app.customers).handle()

    if not customers:
        console.echo("No customers available.", WARNING)
        return

    console.echo(f"{'ID':<10} {'Name':<30}", ACCENT)
    console.echo("-" * 41)
    for c in customers:
        console.echo(f"{c.id:<10} {c.name:<30}")


def view_customers(app: AppState, console: Console) -> CommandResult:
    show_customers(app, console)
    return CommandResult.ok()


def add_customer(app: AppState, console: Console) -> CommandResult:
    customer_id = console.prompt("Enter customer ID:")
    if not customer_id.strip():
        return CommandResult.ok()

    name = console.prompt("Enter customer name:")

    try:
        customer = AddCustomerHandler(app.customers).handle(customer_id, name)
    except DomainException as exc:
        return CommandResult.failed(str(exc))

    return CommandResult.ok(f"Customer '{customer.name}' added successfully.")
