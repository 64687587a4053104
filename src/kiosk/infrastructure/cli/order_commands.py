"""CLI commands for orders."""

from __future__ import annotations

from datetime import datetime

import click

from kiosk.application.create_order import CreateOrderHandler
from kiosk.application.dto import OrderCreateRequest, OrderResponse
from kiosk.application.show_order import ShowOrderHandler
from kiosk.domain.exceptions import DomainException
from kiosk.infrastructure.bootstrap import (
    default_session_factory,
    order_repository,
    product_repository,
)


def _parse_numbers(raw: str) -> list[str]:
    """Parse '001,002, 003' into ['001', '002', '003']."""
    numbers = [part.strip() for part in raw.split(",") if part.strip()]
    if not numbers:
        raise click.BadParameter("Expected at least one product number, e.g. '001,002'.")
    return numbers


def _display_order(dto: OrderResponse) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Registered: {dto.registered_at:%Y-%m-%d %H:%M}")
    click.echo()
    click.echo(f"  {'Number':<8} {'Name':<20} {'Price':>8}")
    click.echo(f"  {'-'*38}")
    for p in dto.products:
        click.echo(f"  {p.product_number:<8} {p.name:<20} {p.price:>8}")
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Order Total':<29} {dto.total_price:>8}")


@click.command("create")
@click.option("--products", required=True, help="Product numbers as '001,002'.")
def order_create(products: str) -> None:
    """Place an order for the given product numbers."""
    request = OrderCreateRequest(product_numbers=_parse_numbers(products))

    try:
        with default_session_factory().begin() as session:
            handler = CreateOrderHandler(
                order_repo=order_repository(session),
                product_repo=product_repository(session),
            )
            dto = handler.handle(request, registered_at=datetime.now())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        with default_session_factory().begin() as session:
            dto = ShowOrderHandler(order_repo=order_repository(session)).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
