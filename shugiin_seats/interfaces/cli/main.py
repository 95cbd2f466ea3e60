"""shugiin-seats CLI エントリーポイント."""

import click

from shugiin_seats.infrastructure.config.logging_config import setup_logging
from shugiin_seats.infrastructure.config.settings import get_settings
from shugiin_seats.interfaces.cli.base import with_error_handling
from shugiin_seats.interfaces.cli.commands.blocks import blocks
from shugiin_seats.interfaces.cli.commands.compute import compute


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（省略時は環境変数 SHUGIIN_SEATS_LOG_LEVEL）",
)
@with_error_handling
def cli(log_level: str | None):
    """衆議院選挙の得票データから議席配分を計算する."""
    setup_logging(log_level or get_settings().log_level)


cli.add_command(compute)
cli.add_command(blocks)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
