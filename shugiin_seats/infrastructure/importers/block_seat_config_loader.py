"""比例ブロック別定数テーブルのローダー — Infrastructure layer.

組み込みの定数テーブル（改定年別）と、JSONファイルによる差し替えに対応する。

ファイル構造:
    {"version": "2017", "expected_total": 176, "blocks": {"北海道": 8, ...}}
"""

import json
import logging

from pathlib import Path

from pydantic import BaseModel as PydanticBaseModel
from pydantic import StrictInt, ValidationError

from shugiin_seats.domain.exceptions import (
    ConfigurationError,
    SeatConfigMismatchError,
)
from shugiin_seats.domain.value_objects.block_seat_table import BlockSeatTable
from shugiin_seats.infrastructure.importers._constants import (
    BLOCK_SEATS_BY_VERSION,
    DEFAULT_BLOCK_SEATS_VERSION,
    PR_TOTAL_SEATS,
    PROPORTIONAL_BLOCKS,
)
from shugiin_seats.infrastructure.importers._utils import normalize_block_name


logger = logging.getLogger(__name__)


class BlockSeatConfigModel(PydanticBaseModel):
    """定数テーブルファイル.

    定数は整数のみ受け付ける（true や "8"、8.0 は不正）。
    """

    version: str = ""
    expected_total: StrictInt = PR_TOTAL_SEATS
    blocks: dict[str, StrictInt]


def default_block_seat_table(
    version: str = DEFAULT_BLOCK_SEATS_VERSION,
) -> BlockSeatTable:
    """組み込みの定数テーブルを返す.

    Args:
        version: 改定年（"2017", "2022"）

    Raises:
        ConfigurationError: 未対応の改定年
    """
    if version not in BLOCK_SEATS_BY_VERSION:
        msg = (
            f"未対応の定数テーブル: {version}"
            f"（対応: {', '.join(sorted(BLOCK_SEATS_BY_VERSION))}）"
        )
        raise ConfigurationError(msg, {"version": version})
    return BlockSeatTable(
        seats_by_block=BLOCK_SEATS_BY_VERSION[version],
        expected_total=PR_TOTAL_SEATS,
        version=version,
        display_names=PROPORTIONAL_BLOCKS,
    )


def load_block_seat_table(path: Path) -> BlockSeatTable:
    """JSONファイルから定数テーブルを読み込む.

    Raises:
        SeatConfigMismatchError: ファイル構造が不正、または定数の合計が総定数と不一致
        UnknownRegionError: 未知のブロック名
    """
    logger.info("定数テーブル読み込み: %s", path)
    try:
        config = BlockSeatConfigModel.model_validate(
            json.loads(path.read_text(encoding="utf-8"))
        )
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise SeatConfigMismatchError(
            0,
            PR_TOTAL_SEATS,
            reason=f"定数テーブルファイルを読み込めません: {path} ({e})",
        ) from e

    seats_by_block: dict[str, int] = {}
    for name, seats in config.blocks.items():
        block = normalize_block_name(name)
        if block in seats_by_block:
            raise SeatConfigMismatchError(
                sum(seats_by_block.values()),
                config.expected_total,
                reason=f"比例ブロック「{name}」が重複しています",
            )
        seats_by_block[block] = seats

    table = BlockSeatTable(
        seats_by_block=seats_by_block,
        expected_total=config.expected_total,
        version=config.version or path.stem,
        display_names=PROPORTIONAL_BLOCKS,
    )
    if table.expected_total != PR_TOTAL_SEATS:
        logger.warning(
            "定数テーブル %s の総定数(%d)が比例代表の総定数(%d)と異なります",
            table.version,
            table.expected_total,
            PR_TOTAL_SEATS,
        )
    missing = sorted(set(PROPORTIONAL_BLOCKS) - set(table))
    if missing:
        logger.warning(
            "定数テーブル %s に含まれないブロック: %s",
            table.version,
            ", ".join(missing),
        )
    logger.info(
        "定数テーブル %s: ブロック=%d, 総定数=%d",
        table.version,
        len(table),
        table.total_seats,
    )
    return table
