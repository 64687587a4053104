import click

from kiosk.infrastructure.bootstrap import default_session_factory
from kiosk.infrastructure.cli.kiosk_commands import kiosk_demo
from kiosk.infrastructure.cli.order_commands import order_create, order_show
from kiosk.infrastructure.cli.product_commands import product_add, product_list
from kiosk.infrastructure.config import get_settings
from kiosk.infrastructure.log_setup import configure_logging


@click.group()
def cli() -> None:
    """Cafe Kiosk: catalog, orders and the kiosk demo."""
    configure_logging(get_settings().log_level)


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@db.command("init")
def db_init() -> None:
    """Create the database tables if they do not exist."""
    default_session_factory()
    click.echo(f"Database ready: {get_settings().database_url}")


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("kiosk.infrastructure.api.app:create_app", factory=True, host=host, port=port)


# Register subcommands
order.add_command(order_create)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
cli.add_command(kiosk_demo)
