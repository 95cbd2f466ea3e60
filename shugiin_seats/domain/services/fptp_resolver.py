"""小選挙区の当選者決定ドメインサービス."""

from shugiin_seats.domain.exceptions import EmptyDistrictError
from shugiin_seats.domain.value_objects.vote_snapshot import (
    Candidate,
    FptpDistrictResult,
    Party,
)


def resolve_fptp_winner(result: FptpDistrictResult) -> Candidate:
    """最多得票の候補者を返す.

    同票の場合は候補者識別子(name, party)が辞書順で最小の候補者を当選とする。
    入力の格納順には依存しない。

    Raises:
        EmptyDistrictError: 候補者がいない選挙区
    """
    if not result.votes:
        raise EmptyDistrictError(result.district)
    return min(result.votes, key=lambda c: (-result.votes[c], c))


class FptpResolver:
    """小選挙区ごとの当選政党を決定する."""

    def winner(self, result: FptpDistrictResult) -> Candidate:
        return resolve_fptp_winner(result)

    def winning_party(self, result: FptpDistrictResult) -> Party:
        return resolve_fptp_winner(result).party
