"""比例ブロックのドント方式議席配分ドメインサービス.

各政党の得票数を1, 2, …, 定数で割った商を全政党分まとめて降順に並べ、
上位から定数分の商にそれぞれ1議席を与える。

商の同値は頻繁に起こる（例: 200000/5 == 120000/3 == 40000）ため、
同値の場合は次の順で決定的に並べる:
    1. 政党の得票総数が多い方
    2. 除数が小さい方
    3. 政党名の辞書順
"""

import logging

from dataclasses import dataclass
from fractions import Fraction

from shugiin_seats.domain.exceptions import NoVotesError
from shugiin_seats.domain.value_objects.vote_snapshot import (
    Party,
    PrBlockResult,
    VoteCount,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quotient:
    """ドント方式の商1つ分."""

    party: Party
    divisor: int
    value: Fraction
    party_votes: VoteCount

    @property
    def sort_key(self) -> tuple[Fraction, VoteCount, int, Party]:
        return (-self.value, -self.party_votes, self.divisor, self.party)


class DHondtApportioner:
    """比例ブロック1つ分の議席をドント方式で配分する."""

    def rank_quotients(self, result: PrBlockResult, seats: int) -> list[Quotient]:
        """全政党の商を配分順（降順・同値は決定的な順）に並べて返す.

        得票0の政党の商はすべて0で議席に届かないため一覧に含めない。

        Args:
            result: 比例ブロックの得票結果
            seats: ブロックの定数

        Returns:
            配分順に並んだ商の一覧（先頭からseats個が当選）

        Raises:
            ValueError: seatsが1未満
            NoVotesError: 総得票数が0
        """
        if seats < 1:
            msg = f"比例ブロック「{result.block}」の定数は1以上でなければなりません: {seats}"
            raise ValueError(msg)
        if result.total_votes <= 0:
            raise NoVotesError(result.block)

        quotients = [
            Quotient(
                party=party,
                divisor=divisor,
                value=Fraction(votes) / divisor,
                party_votes=votes,
            )
            for party, votes in result.votes.items()
            if votes > 0
            for divisor in range(1, seats + 1)
        ]
        quotients.sort(key=lambda q: q.sort_key)
        return quotients

    def apportion(self, result: PrBlockResult, seats: int) -> dict[Party, int]:
        """政党ごとの獲得議席数を返す.

        入力に含まれる全政党をキーに持ち（議席なしは0）、合計は必ずseatsになる。
        """
        winners = self.rank_quotients(result, seats)[:seats]
        allocation = {party: 0 for party in result.parties}
        for quotient in winners:
            allocation[quotient.party] += 1

        logger.debug(
            "比例ブロック %s: 定数=%d, 最終議席の商=%s (%s ÷ %d), 配分=%s",
            result.block,
            seats,
            float(winners[-1].value),
            winners[-1].party,
            winners[-1].divisor,
            allocation,
        )
        return allocation

    def cutoff_quotient(self, result: PrBlockResult, seats: int) -> Quotient:
        """最後の1議席を獲得した商（当選ライン）を返す."""
        return self.rank_quotients(result, seats)[seats - 1]
