"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from kiosk.application.add_product import AddProductHandler
from kiosk.application.list_selling_products import ListSellingProductsHandler
from kiosk.domain.exceptions import DomainException
from kiosk.domain.model.product import ProductSellingStatus, ProductType
from kiosk.infrastructure.bootstrap import default_session_factory, product_repository

_TYPE_CHOICE = click.Choice([t.value for t in ProductType], case_sensitive=False)
_STATUS_CHOICE = click.Choice([s.value for s in ProductSellingStatus], case_sensitive=False)


@click.command("add")
@click.option("--number", "product_number", required=True, help="Product number, e.g. 001.")
@click.option("--type", "product_type", required=True, type=_TYPE_CHOICE, help="Product type.")
@click.option(
    "--status", "selling_status", default=ProductSellingStatus.SELLING.value,
    show_default=True, type=_STATUS_CHOICE, help="Selling status.",
)
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=int, help="Price in minor units (e.g. 4000).")
def product_add(
    product_number: str, product_type: str, selling_status: str, name: str, price: int
) -> None:
    """Add a new product to the catalog."""
    try:
        with default_session_factory().begin() as session:
            handler = AddProductHandler(product_repo=product_repository(session))
            product = handler.handle(
                product_number=product_number,
                product_type=ProductType(product_type.upper()),
                selling_status=ProductSellingStatus(selling_status.upper()),
                name=name,
                price=price,
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} {product.product_number} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--selling", is_flag=True, default=False, help="Only products shown on the menu.")
def product_list(selling: bool) -> None:
    """List products in the catalog."""
    with default_session_factory().begin() as session:
        repo = product_repository(session)
        if selling:
            products = ListSellingProductsHandler(repo).handle()
        else:
            products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Number':<8} {'Type':<10} {'Status':<13} {'Name':<20} {'Price':>8}")
    click.echo("-" * 70)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.product_number:<8} {p.product_type.value:<10} "
            f"{p.selling_status.value:<13} {p.name:<20} {p.price:>8}"
        )
