"""比例ブロック別定数テーブルの値オブジェクト — Domain layer."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from shugiin_seats.domain.exceptions import (
    SeatConfigMismatchError,
    UnknownRegionError,
)


def _is_valid_seat_count(seats: object) -> bool:
    return isinstance(seats, int) and not isinstance(seats, bool) and seats >= 1


@dataclass(frozen=True)
class BlockSeatTable:
    """比例ブロックごとの定数（ブロック識別子 → 議席数）.

    定数は区割り改定ごとに外部で決まる設定値であり、得票データからは導出しない。
    構築時に各定数が1以上であること、合計がexpected_totalと一致することを検証する。

    Attributes:
        seats_by_block: ブロック識別子 → 議席数
        expected_total: 比例代表の総定数
        version: 定数の改定年などのラベル（例: "2017"）
        display_names: ブロック識別子 → 表示名（例: "hokkaido" → "北海道"）
    """

    seats_by_block: Mapping[str, int]
    expected_total: int
    version: str = ""
    display_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        valid = {
            block: seats
            for block, seats in self.seats_by_block.items()
            if _is_valid_seat_count(seats)
        }
        for block, seats in self.seats_by_block.items():
            if block not in valid:
                raise SeatConfigMismatchError(
                    sum(valid.values()),
                    self.expected_total,
                    reason=f"比例ブロック「{block}」の定数が不正です: {seats!r}",
                )
        if self.total_seats != self.expected_total:
            raise SeatConfigMismatchError(self.total_seats, self.expected_total)
        object.__setattr__(
            self, "seats_by_block", MappingProxyType(dict(self.seats_by_block))
        )
        object.__setattr__(
            self, "display_names", MappingProxyType(dict(self.display_names))
        )

    @property
    def total_seats(self) -> int:
        return sum(self.seats_by_block.values())

    def seats(self, block: str) -> int:
        """ブロックの定数を返す.

        Raises:
            UnknownRegionError: テーブルに存在しないブロック
        """
        try:
            return self.seats_by_block[block]
        except KeyError:
            raise UnknownRegionError(block, kind="block") from None

    def display_name(self, block: str) -> str:
        return self.display_names.get(block, block)

    def __contains__(self, block: object) -> bool:
        return block in self.seats_by_block

    def __iter__(self) -> Iterator[str]:
        return iter(self.seats_by_block)

    def __len__(self) -> int:
        return len(self.seats_by_block)
