"""CLI walkthrough of the in-memory CafeKiosk."""

from __future__ import annotations

import click

from kiosk.domain.exceptions import DomainException
from kiosk.domain.model.beverage import Americano, Latte
from kiosk.domain.model.cafe_kiosk import CafeKiosk


@click.command("demo")
@click.option("--checkout", is_flag=True, default=False, help="Also check out the cart.")
def kiosk_demo(checkout: bool) -> None:
    """Add a Latte and an Americano to a kiosk cart and print the total."""
    cafe_kiosk = CafeKiosk()

    cafe_kiosk.add(Latte())
    click.echo("Added a Latte to the cart.")

    cafe_kiosk.add(Americano())
    click.echo("Added an Americano to the cart.")

    click.echo(f"Total price: {cafe_kiosk.calculate_total_price()}")

    if checkout:
        try:
            order = cafe_kiosk.create_order()
        except DomainException as exc:
            raise click.ClickException(str(exc))
        click.echo(f"Order placed at {order.ordered_at:%H:%M} with {len(order.beverages)} beverage(s).")
