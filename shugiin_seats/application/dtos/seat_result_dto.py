"""議席計算ユースケース用DTO."""

from dataclasses import dataclass, field

from shugiin_seats.domain.value_objects.seat_tally import SeatTally
from shugiin_seats.domain.value_objects.vote_snapshot import (
    Candidate,
    Party,
    VoteSnapshot,
)


@dataclass
class ComputeSeatResultInputDto:
    """議席計算の入力DTO."""

    snapshot: VoteSnapshot
    expected_fptp_districts: int | None = None
    strict_district_count: bool = False


@dataclass
class ComputeSeatResultOutputDto:
    """議席計算の出力DTO.

    tallyは確定済み（freeze済み）の集計。district_winners・block_allocationsは
    選挙区・ブロック単位の内訳で、いずれも識別子順に並ぶ。
    """

    tally: SeatTally
    district_winners: dict[str, Candidate] = field(default_factory=dict)
    block_allocations: dict[str, dict[Party, int]] = field(default_factory=dict)
