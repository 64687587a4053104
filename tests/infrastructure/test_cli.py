"""CLI tests using click's CliRunner against a temporary SQLite file."""

import pytest
from click.testing import CliRunner

from kiosk.infrastructure import bootstrap
from kiosk.infrastructure.cli.main import cli
from kiosk.infrastructure.config import get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("KIOSK_DATABASE_URL", f"sqlite:///{tmp_path / 'kiosk.db'}")
    get_settings.cache_clear()
    bootstrap.engine.cache_clear()
    yield CliRunner()
    bootstrap.engine().dispose()
    get_settings.cache_clear()
    bootstrap.engine.cache_clear()


def _add(runner, number, name, price, status="SELLING"):
    result = runner.invoke(cli, [
        "product", "add", "--number", number, "--type", "HANDMADE",
        "--status", status, "--name", name, "--price", str(price),
    ])
    assert result.exit_code == 0, result.output
    return result


class TestProductCommands:

    def test_add_and_list(self, runner):
        result = _add(runner, "001", "Americano", 4000)
        assert "'Americano' added at 4000" in result.output

        listing = runner.invoke(cli, ["product", "list"])
        assert listing.exit_code == 0
        assert "Americano" in listing.output

    def test_list_selling_hides_stopped(self, runner):
        _add(runner, "001", "Americano", 4000)
        _add(runner, "002", "Bread", 3000, status="STOP_SELLING")

        listing = runner.invoke(cli, ["product", "list", "--selling"])

        assert "Americano" in listing.output
        assert "Bread" not in listing.output

    def test_empty_catalog(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert "No products found." in result.output

    def test_invalid_price_reported(self, runner):
        result = runner.invoke(cli, [
            "product", "add", "--number", "001", "--type", "HANDMADE",
            "--name", "Americano", "--price=-1",
        ])
        assert result.exit_code != 0
        assert "cannot be negative" in result.output


class TestOrderCommands:

    def test_create_and_show(self, runner):
        _add(runner, "001", "Americano", 4000)
        _add(runner, "002", "Latte", 4500)

        created = runner.invoke(cli, ["order", "create", "--products", "001,002,003"])
        assert created.exit_code == 0, created.output
        assert "Order #1" in created.output
        assert "8500" in created.output

        shown = runner.invoke(cli, ["order", "show", "--id", "1"])
        assert shown.exit_code == 0
        assert "Latte" in shown.output

    def test_show_unknown_order(self, runner):
        result = runner.invoke(cli, ["order", "show", "--id", "7"])
        assert result.exit_code != 0
        assert "Order #7 not found" in result.output

    def test_blank_product_list_rejected(self, runner):
        result = runner.invoke(cli, ["order", "create", "--products", " , "])
        assert result.exit_code != 0


class TestKioskDemo:

    def test_prints_total(self, runner):
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "Total price: 8500" in result.output


class TestDbInit:

    def test_creates_database(self, runner, tmp_path):
        result = runner.invoke(cli, ["db", "init"])
        assert result.exit_code == 0
        assert (tmp_path / "kiosk.db").exists()
