"""議席計算ユースケース.

1つの得票スナップショットから、小選挙区・比例代表を合わせた政党別議席を計算する。

処理フロー:
    1. 比例ブロックが定数テーブルに存在するか検証（未知のブロックは即エラー）
    2. 小選挙区数の検証（期待値指定時のみ。既定は警告のみ）
    3. 各小選挙区の当選者を決定し、選挙区ごとの部分集計を作成
    4. 各比例ブロックをドント方式で配分し、ブロックごとの部分集計を作成
    5. 部分集計を識別子順に畳み込み、確定済みの集計を返す

選挙区・ブロック間に依存はないため、executorを渡すと3・4を並列に実行する。
いずれかの計算が失敗した時点で全体を失敗とし、部分的な集計は返さない。
"""

import logging

from collections.abc import Callable, Iterable
from concurrent.futures import Executor
from typing import TypeVar

from shugiin_seats.application.dtos.seat_result_dto import (
    ComputeSeatResultInputDto,
    ComputeSeatResultOutputDto,
)
from shugiin_seats.domain.exceptions import (
    DistrictCountMismatchError,
    UnknownRegionError,
)
from shugiin_seats.domain.services.dhondt_apportioner import DHondtApportioner
from shugiin_seats.domain.services.fptp_resolver import FptpResolver
from shugiin_seats.domain.value_objects.block_seat_table import BlockSeatTable
from shugiin_seats.domain.value_objects.seat_tally import SeatTally
from shugiin_seats.domain.value_objects.vote_snapshot import (
    Candidate,
    FptpDistrictResult,
    Party,
    PrBlockResult,
    VoteSnapshot,
)


logger = logging.getLogger(__name__)

_T = TypeVar("_T")
_R = TypeVar("_R")


class ComputeSeatResultUseCase:
    """得票スナップショットから議席集計を計算するユースケース."""

    def __init__(
        self,
        block_seat_table: BlockSeatTable,
        fptp_resolver: FptpResolver | None = None,
        apportioner: DHondtApportioner | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._table = block_seat_table
        self._resolver = fptp_resolver or FptpResolver()
        self._apportioner = apportioner or DHondtApportioner()
        self._executor = executor

    def execute(
        self,
        input_dto: ComputeSeatResultInputDto,
    ) -> ComputeSeatResultOutputDto:
        """議席計算を実行する."""
        snapshot = input_dto.snapshot
        logger.info(
            "議席計算開始: 小選挙区=%d, 比例ブロック=%d (定数テーブル %s)",
            len(snapshot.fptp),
            len(snapshot.pr),
            self._table.version or "-",
        )

        self._validate_blocks(snapshot)
        self._validate_district_count(
            snapshot,
            input_dto.expected_fptp_districts,
            input_dto.strict_district_count,
        )

        districts = [snapshot.fptp[d] for d in snapshot.district_ids]
        blocks = [snapshot.pr[b] for b in snapshot.block_ids]

        winners = self._map(self._resolve_district, districts)
        allocations = self._map(self._apportion_block, blocks)

        tally = SeatTally()
        for _, partial in winners:
            tally.merge(partial)
        for _, partial in allocations:
            tally.merge(partial)
        tally.freeze()

        output = ComputeSeatResultOutputDto(
            tally=tally,
            district_winners={
                result.district: winner
                for result, (winner, _) in zip(districts, winners, strict=True)
            },
            block_allocations={
                result.block: allocation
                for result, (allocation, _) in zip(blocks, allocations, strict=True)
            },
        )

        logger.info(
            "議席計算完了: 小選挙区=%d, 比例=%d, 合計=%d, 議席獲得政党=%d",
            tally.total_fptp,
            tally.total_pr,
            tally.total,
            len(tally.parties()),
        )
        return output

    def _resolve_district(
        self,
        result: FptpDistrictResult,
    ) -> tuple[Candidate, SeatTally]:
        winner = self._resolver.winner(result)
        partial = SeatTally()
        partial.record_fptp_seat(winner.party)
        logger.debug("小選挙区 %s: 当選 %s", result.district, winner)
        return winner, partial

    def _apportion_block(
        self,
        result: PrBlockResult,
    ) -> tuple[dict[Party, int], SeatTally]:
        allocation = self._apportioner.apportion(
            result, self._table.seats(result.block)
        )
        partial = SeatTally()
        for party in sorted(allocation):
            partial.record_pr_seat(party, allocation[party])
        return allocation, partial

    def _map(
        self,
        func: Callable[[_T], _R],
        items: Iterable[_T],
    ) -> list[_R]:
        if self._executor is None:
            return [func(item) for item in items]
        return list(self._executor.map(func, items))

    def _validate_blocks(self, snapshot: VoteSnapshot) -> None:
        for block in snapshot.block_ids:
            if block not in self._table:
                logger.error(
                    "定数テーブル %s に存在しないブロック: %s",
                    self._table.version,
                    block,
                )
                raise UnknownRegionError(block, kind="block")

    def _validate_district_count(
        self,
        snapshot: VoteSnapshot,
        expected: int | None,
        strict: bool,
    ) -> None:
        if expected is None or len(snapshot.fptp) == expected:
            return
        if strict:
            raise DistrictCountMismatchError(len(snapshot.fptp), expected)
        logger.warning(
            "小選挙区数(%d)が定数(%d)と一致しません",
            len(snapshot.fptp),
            expected,
        )


def compute_result(
    snapshot: VoteSnapshot,
    block_seat_table: BlockSeatTable,
) -> SeatTally:
    """スナップショットから確定済みの議席集計を返す."""
    use_case = ComputeSeatResultUseCase(block_seat_table)
    return use_case.execute(ComputeSeatResultInputDto(snapshot=snapshot)).tally
