"""定数テーブルの解決（コマンド間で共有）."""

from pathlib import Path

from shugiin_seats.domain.value_objects.block_seat_table import BlockSeatTable
from shugiin_seats.infrastructure.config.settings import Settings
from shugiin_seats.infrastructure.importers.block_seat_config_loader import (
    default_block_seat_table,
    load_block_seat_table,
)


def resolve_block_seat_table(
    settings: Settings,
    seat_config: Path | None = None,
    seat_table_version: str | None = None,
) -> BlockSeatTable:
    """引数 > 環境変数 > 組み込み既定値 の順で定数テーブルを決定する."""
    if seat_config is not None:
        return load_block_seat_table(seat_config)
    if seat_table_version is not None:
        return default_block_seat_table(seat_table_version)
    if settings.seat_config is not None:
        return load_block_seat_table(settings.seat_config)
    return default_block_seat_table(settings.seat_table_version)
