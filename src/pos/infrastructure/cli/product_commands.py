"""Menu commands for the product catalog."""

from __future__ import annotations

from pos.application.add_product import AddProductHandler
from pos.application.delete_product import DeleteProductHandler
from pos.application.list_products import ListProductsHandler
from pos.application.update_product import UpdateProductHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import AppState
from pos.infrastructure.cli.console import ACCENT, SUCCESS, WARNING, Console
from pos.infrastructure.cli.result import CommandResult


def show_products(app: AppState, console: Console) -> None:
    """Print the catalog table (also shown during checkout)."""
    console.echo()
    console.echo("--- Product List ---", SUCCESS)
    products = ListProductsHandler(app.products).handle()

    if not products:
        console.echo("No products available.", WARNING)
        return

    console.echo(f"{'ID':<10} {'Name':<24} {'Price':>10}", ACCENT)
    console.echo("-" * 46)
    for p in products:
        console.echo(f"{p.id:<10} {p.name:<24} {p.price:>10}")


def view_products(app: AppState, console: Console) -> CommandResult:
    show_products(app, console)
    return CommandResult.ok()


def add_product(app: AppState, console: Console) -> CommandResult:
    product_id = console.prompt("Enter product ID:")
    if not product_id.strip():
        return CommandResult.ok()

    name = console.prompt("Enter product name:")
    price = console.prompt("Enter product price:")

    try:
        product = AddProductHandler(app.products).handle(product_id, name, price)
    except DomainException as exc:
        return CommandResult.failed(str(exc))

    return CommandResult.ok(f"Product '{product.name}' added at {product.price}.")


def update_product(app: AppState, console: Console) -> CommandResult:
    product_id = console.prompt("Enter product ID to update:")
    if not product_id.strip():
        return CommandResult.ok()

    handler = UpdateProductHandler(app.products)
    try:
        current = handler.get(product_id)
        new_name = console.prompt(
            f"Enter new name for '{current.name}' (or press Enter to keep):"
        )
        new_price = console.prompt(
            f"Enter new price (currently {current.price}, or press Enter to keep):"
        )
        changed = handler.handle(product_id, new_name=new_name, new_price=new_price)
    except DomainException as exc:
        return CommandResult.failed(str(exc))

    if not changed:
        return CommandResult.ok(f"Product '{current.id}' left unchanged.")
    return CommandResult.ok(f"Product '{current.id}' updated successfully.")


def delete_product(app: AppState, console: Console) -> CommandResult:
    product_id = console.prompt("Enter product ID to delete:")
    if not product_id.strip():
        return CommandResult.ok()

    try:
        DeleteProductHandler(app.products).handle(product_id)
    except DomainException as exc:
        return CommandResult.failed(str(exc))

    return CommandResult.ok(f"Product '{product_id.strip()}' deleted successfully.")
