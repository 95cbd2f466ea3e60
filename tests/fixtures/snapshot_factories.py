from collections.abc import Mapping

from shugiin_seats.domain.value_objects.block_seat_table import BlockSeatTable
from shugiin_seats.domain.value_objects.vote_snapshot import (
    PrBlockResult,
    VoteCount,
    VoteSnapshot,
    VoteSnapshotBuilder,
)


def make_block_seat_table(
    seats_by_block: Mapping[str, int] | None = None,
    version: str = "test",
) -> BlockSeatTable:
    seats = dict(seats_by_block or {"hokkaido": 8})
    return BlockSeatTable(
        seats_by_block=seats,
        expected_total=sum(seats.values()),
        version=version,
    )


def make_pr_block(
    votes: Mapping[str, VoteCount],
    block: str = "hokkaido",
) -> PrBlockResult:
    return PrBlockResult(block=block, votes=votes)


def make_scenario_snapshot() -> VoteSnapshot:
    """小選挙区1つ（ldp勝利）と北海道ブロック（定数8）の基本シナリオ."""
    return (
        VoteSnapshotBuilder()
        .add_candidate("北海道1区", "a", "cdp", 100000)
        .add_candidate("北海道1区", "b", "ldp", 200000)
        .add_block("hokkaido", {"cdp": 120000, "ldp": 200000})
        .build()
    )
