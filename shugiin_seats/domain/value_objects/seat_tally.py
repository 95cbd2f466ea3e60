"""政党別獲得議席の集計 — Domain layer."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from shugiin_seats.domain.value_objects.vote_snapshot import Party


@dataclass(frozen=True)
class PartySeats:
    """政党1つ分の獲得議席."""

    party: Party
    fptp: int
    pr: int

    @property
    def total(self) -> int:
        return self.fptp + self.pr


class SeatTally:
    """小選挙区・比例代表それぞれの政党別議席数を集計する.

    議席は加算のみで、取り消しはない。1回の計算が終わったらfreeze()し、
    以降は読み取り専用の結果として扱う。並列に計算した部分集計は
    merge()で逐次畳み込む（同じカウンタへの同時書き込みはしない）。
    """

    def __init__(self) -> None:
        self._fptp: Counter[Party] = Counter()
        self._pr: Counter[Party] = Counter()
        self._frozen = False

    def record_fptp_seat(self, party: Party) -> None:
        """小選挙区の1議席を記録する."""
        self._ensure_mutable()
        self._fptp[party] += 1

    def record_pr_seat(self, party: Party, count: int = 1) -> None:
        """比例代表の議席をcount議席分記録する."""
        self._ensure_mutable()
        if count < 0:
            msg = f"議席数は0以上でなければなりません: {count}"
            raise ValueError(msg)
        if count:
            self._pr[party] += count

    def merge(self, other: SeatTally) -> None:
        """別の部分集計を取り込む."""
        self._ensure_mutable()
        self._fptp.update(other._fptp)
        self._pr.update(other._pr)

    def freeze(self) -> SeatTally:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def fptp_seats(self, party: Party) -> int:
        return self._fptp[party]

    def pr_seats(self, party: Party) -> int:
        return self._pr[party]

    def total_seats(self, party: Party) -> int:
        return self.fptp_seats(party) + self.pr_seats(party)

    @property
    def total_fptp(self) -> int:
        return sum(self._fptp.values())

    @property
    def total_pr(self) -> int:
        return sum(self._pr.values())

    @property
    def total(self) -> int:
        return self.total_fptp + self.total_pr

    def parties(self) -> list[Party]:
        """議席を1つ以上獲得した政党を合計議席の降順（同数は政党名順）で返す."""
        seated = {p for p in (*self._fptp, *self._pr) if self.total_seats(p) > 0}
        return sorted(seated, key=lambda p: (-self.total_seats(p), p))

    def rows(self) -> list[PartySeats]:
        return [
            PartySeats(party=p, fptp=self.fptp_seats(p), pr=self.pr_seats(p))
            for p in self.parties()
        ]

    def as_dict(self) -> dict[Party, tuple[int, int, int]]:
        """政党 → (小選挙区, 比例, 合計) の辞書を返す."""
        return {row.party: (row.fptp, row.pr, row.total) for row in self.rows()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeatTally):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SeatTally({self.as_dict()!r})"

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("確定済みの集計には議席を追加できません")
