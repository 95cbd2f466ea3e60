"""比例ブロック定数表示コマンド."""

from pathlib import Path

import click

from shugiin_seats.infrastructure.config.settings import get_settings
from shugiin_seats.infrastructure.importers._constants import BLOCK_SEATS_BY_VERSION
from shugiin_seats.interfaces.cli.base import with_error_handling
from shugiin_seats.interfaces.cli.commands._seat_table import (
    resolve_block_seat_table,
)


@click.command()
@click.option(
    "--seat-config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="比例ブロック定数テーブルのJSONファイル",
)
@click.option(
    "--seat-table",
    "seat_table_version",
    type=click.Choice(sorted(BLOCK_SEATS_BY_VERSION)),
    default=None,
    help="組み込みの定数テーブル（改定年）",
)
@with_error_handling
def blocks(seat_config: Path | None, seat_table_version: str | None):
    """比例ブロックごとの定数を表示する."""
    table = resolve_block_seat_table(get_settings(), seat_config, seat_table_version)

    click.echo(f"定数テーブル: {table.version}")
    for block in table:
        click.echo(f"  {table.display_name(block):<8} {table.seats(block):>4}")
    click.echo(f"  {'合計':<8} {table.total_seats:>4}")
