"""得票データの値オブジェクト — Domain layer.

小選挙区・比例ブロックそれぞれの得票数と、1回の計算に用いる得票スナップショットを表す。
得票数は按分票による小数を含みうるため、intまたはFractionで正確に保持する。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from fractions import Fraction
from types import MappingProxyType

from shugiin_seats.domain.exceptions import InvalidVoteCountError


Party = str
VoteCount = int | Fraction


def validate_vote_count(region: str, subject: str, votes: object) -> None:
    """得票数が非負の正確な数値であることを検証する.

    boolはintのサブクラスだが得票数としては受け付けない。
    floatはNaNや丸め誤差を持ち込むため、ローダー側でFractionに変換しておくこと。
    """
    if isinstance(votes, bool) or not isinstance(votes, (int, Fraction)):
        raise InvalidVoteCountError(region, subject, votes)
    if votes < 0:
        raise InvalidVoteCountError(region, subject, votes)


@dataclass(frozen=True, order=True)
class Candidate:
    """小選挙区の候補者.

    nameは選挙区内でのみ一意。比較は(name, party)の辞書順で、
    同票時の当選者決定に使う。
    """

    name: str
    party: Party

    def __str__(self) -> str:
        return f"{self.name} ({self.party})"


@dataclass(frozen=True)
class FptpDistrictResult:
    """小選挙区1つ分の得票結果."""

    district: str
    votes: Mapping[Candidate, VoteCount] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for candidate, count in self.votes.items():
            validate_vote_count(self.district, candidate.name, count)
        object.__setattr__(self, "votes", MappingProxyType(dict(self.votes)))

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return tuple(sorted(self.votes))

    def __len__(self) -> int:
        return len(self.votes)


@dataclass(frozen=True)
class PrBlockResult:
    """比例ブロック1つ分の政党別得票結果."""

    block: str
    votes: Mapping[Party, VoteCount] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for party, count in self.votes.items():
            validate_vote_count(self.block, party, count)
        object.__setattr__(self, "votes", MappingProxyType(dict(self.votes)))

    @property
    def parties(self) -> tuple[Party, ...]:
        return tuple(sorted(self.votes))

    @property
    def total_votes(self) -> VoteCount:
        return sum(self.votes.values(), 0)


@dataclass(frozen=True)
class VoteSnapshot:
    """1回の計算に用いる得票データ全体.

    構築後は変更されない。小選挙区・比例ブロックのキーは
    それぞれの結果オブジェクトが持つ識別子と一致していなければならない。
    """

    fptp: Mapping[str, FptpDistrictResult] = field(default_factory=dict)
    pr: Mapping[str, PrBlockResult] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for district, result in self.fptp.items():
            if district != result.district:
                msg = f"小選挙区キー「{district}」と結果の選挙区名「{result.district}」が一致しません"
                raise ValueError(msg)
        for block, result in self.pr.items():
            if block != result.block:
                msg = f"比例ブロックキー「{block}」と結果のブロック名「{result.block}」が一致しません"
                raise ValueError(msg)
        object.__setattr__(self, "fptp", MappingProxyType(dict(self.fptp)))
        object.__setattr__(self, "pr", MappingProxyType(dict(self.pr)))

    @property
    def district_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self.fptp))

    @property
    def block_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self.pr))


class VoteSnapshotBuilder:
    """VoteSnapshotを段階的に組み立てるビルダー.

    ファイルローダーとテストフィクスチャの双方がこのビルダー経由で
    同じVoteSnapshotを生成する。

    Example:
        snapshot = (
            VoteSnapshotBuilder()
            .add_candidate("北海道1区", "a", "cdp", 100000)
            .add_candidate("北海道1区", "b", "ldp", 200000)
            .add_block("hokkaido", {"cdp": 120000, "ldp": 200000})
            .build()
        )
    """

    def __init__(self) -> None:
        self._fptp: dict[str, dict[Candidate, VoteCount]] = {}
        self._pr: dict[str, dict[Party, VoteCount]] = {}

    def add_district(
        self,
        district: str,
        candidates: Iterable[tuple[str, Party, VoteCount]] = (),
    ) -> VoteSnapshotBuilder:
        """小選挙区を追加する（候補者なしの選挙区も表現できる）."""
        self._fptp.setdefault(district, {})
        for name, party, votes in candidates:
            self.add_candidate(district, name, party, votes)
        return self

    def add_candidate(
        self,
        district: str,
        name: str,
        party: Party,
        votes: VoteCount,
    ) -> VoteSnapshotBuilder:
        candidates = self._fptp.setdefault(district, {})
        candidate = Candidate(name=name, party=party)
        if candidate in candidates:
            msg = f"小選挙区「{district}」に候補者「{candidate}」が重複しています"
            raise ValueError(msg)
        candidates[candidate] = votes
        return self

    def add_block(
        self,
        block: str,
        votes: Mapping[Party, VoteCount],
    ) -> VoteSnapshotBuilder:
        if block in self._pr:
            msg = f"比例ブロック「{block}」が重複しています"
            raise ValueError(msg)
        self._pr[block] = dict(votes)
        return self

    def build(self) -> VoteSnapshot:
        return VoteSnapshot(
            fptp={
                district: FptpDistrictResult(district=district, votes=votes)
                for district, votes in self._fptp.items()
            },
            pr={
                block: PrBlockResult(block=block, votes=votes)
                for block, votes in self._pr.items()
            },
        )
