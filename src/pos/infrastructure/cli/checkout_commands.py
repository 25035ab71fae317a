"""Interactive driver for the Checkout use case."""

from __future__ import annotations

from pos.application.checkout import (
    CANCEL_TOKEN,
    DONE_TOKEN,
    LIST_TOKEN,
    CheckoutSession,
    is_token,
)
from pos.application.list_receipts import deleted_product_placeholder
from pos.domain.exceptions import DomainException
from pos.domain.model.customer import Customer
from pos.domain.model.receipt import Receipt
from pos.infrastructure.bootstrap import AppState
from pos.infrastructure.cli.console import SUCCESS, WARNING, Console
from pos.infrastructure.cli.customer_commands import show_customers
from pos.infrastructure.cli.product_commands import show_products
from pos.infrastructure.cli.result import CommandResult


def checkout(app: AppState, console: Console) -> CommandResult:
    session = CheckoutSession(app.products, app.customers, app.receipts)
    _select_customer(app, console, session)

    while True:
        show_products(app, console)
        token = console.prompt(
            f"Enter product ID (or '{DONE_TOKEN}' to finish, "
            f"'{CANCEL_TOKEN}' to cancel):"
        )
        if is_token(token, DONE_TOKEN):
            break
        if is_token(token, CANCEL_TOKEN):
            session.cancel()
            console.echo("Checkout canceled.", WARNING)
            return CommandResult.ok()

        try:
            product = session.find_product(token)
            quantity = console.prompt(f"Enter quantity for '{product.name}':")
            session.add_item(product.id, quantity)
        except DomainException as exc:
            console.echo(str(exc), WARNING)

    try:
        receipt = session.finalize()
    except DomainException as exc:
        return CommandResult.failed(f"Checkout failed: {exc}")

    _print_receipt(app, console, receipt)
    return CommandResult.ok(f"Receipt {receipt.id} recorded.")


def _select_customer(app: AppState, console: Console, session: CheckoutSession) -> Customer:
    while True:
        raw = console.prompt(
            f"Enter customer ID (or '{LIST_TOKEN}' to view customers, "
            "or leave blank for guest):"
        )
        if is_token(raw, LIST_TOKEN):
            show_customers(app, console)
            continue
        try:
            return session.select_customer(raw)
        except DomainException as exc:
            console.echo(str(exc), WARNING)


def _print_receipt(app: AppState, console: Console, receipt: Receipt) -> None:
    console.echo()
    console.echo("--- Receipt ---", SUCCESS)
    console.echo(f"Customer: {receipt.customer_name}")
    for product_id, qty in receipt.items.items():
        product = app.products.get_by_id(product_id)
        if product is None:
            console.echo(f"{deleted_product_placeholder(product_id)} x{qty}", WARNING)
            continue
        console.echo(f"{product.name} x{qty} = {product.price * qty}")
    console.echo(f"Total: {receipt.total}", SUCCESS)
