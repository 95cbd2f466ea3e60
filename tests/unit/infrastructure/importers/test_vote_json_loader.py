"""得票データJSONローダーのテスト."""

import json

from fractions import Fraction
from pathlib import Path

import pytest

from shugiin_seats.domain.exceptions import (
    InvalidVoteCountError,
    UnknownRegionError,
    VoteDataFormatError,
)
from shugiin_seats.domain.value_objects.vote_snapshot import Candidate
from shugiin_seats.infrastructure.importers.vote_json_loader import VoteJsonLoader


VOTES_DATA = {
    "pr": {
        "北海道": {"自由民主党": 863300, "立憲民主党": 682912.0},
        "四国ブロック": {"自由民主党": 664805, "立憲民主党": 291870},
    },
    "fptp": {
        "北海道1区": [
            {"name": "道下 大樹", "party": "立憲民主党", "votes": 94664},
            {"name": "船橋 利実", "party": "自由民主党", "votes": 89059},
        ],
        "東京1区": [
            {"party": "自由民主党", "votes": "１００，０００"},
            {"party": "自由民主党", "votes": 12345.678},
        ],
    },
}


@pytest.fixture()
def loader() -> VoteJsonLoader:
    return VoteJsonLoader()


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "votes.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestVoteJsonLoader:
    def test_load_file(self, loader: VoteJsonLoader, tmp_path: Path) -> None:
        snapshot = loader.load(_write(tmp_path, VOTES_DATA))

        assert snapshot.block_ids == ("hokkaido", "shikoku")
        assert snapshot.pr["hokkaido"].votes == {
            "自由民主党": 863300,
            "立憲民主党": 682912,
        }
        district = snapshot.fptp["北海道1区"]
        assert district.votes[Candidate("道下 大樹", "立憲民主党")] == 94664

    def test_missing_names_are_numbered(self, loader: VoteJsonLoader) -> None:
        """候補者名がない場合は政党名と順番で区別する."""
        snapshot = loader.load_dict(VOTES_DATA)

        votes = snapshot.fptp["東京1区"].votes
        assert votes[Candidate("自由民主党#1", "自由民主党")] == 100000
        assert votes[Candidate("自由民主党#2", "自由民主党")] == Fraction("12345.678")

    def test_decimals_are_exact(self, loader: VoteJsonLoader) -> None:
        snapshot = loader.loads('{"pr": {"東海": {"a": 0.1, "b": 0.2}}}')

        assert snapshot.pr["tokai"].total_votes == Fraction(3, 10)

    def test_empty_sections(self, loader: VoteJsonLoader) -> None:
        snapshot = loader.loads("{}")

        assert len(snapshot.pr) == 0
        assert len(snapshot.fptp) == 0

    def test_empty_district_is_kept(self, loader: VoteJsonLoader) -> None:
        snapshot = loader.load_dict({"fptp": {"北海道2区": []}})

        assert len(snapshot.fptp["北海道2区"]) == 0

    def test_unknown_block_raises(self, loader: VoteJsonLoader) -> None:
        with pytest.raises(UnknownRegionError) as exc_info:
            loader.load_dict({"pr": {"沖縄": {"a": 1}}})

        assert exc_info.value.region == "沖縄"

    def test_duplicate_block_after_normalization_raises(
        self, loader: VoteJsonLoader
    ) -> None:
        with pytest.raises(VoteDataFormatError, match="重複"):
            loader.load_dict({"pr": {"東京": {"a": 1}, "東京都": {"a": 2}}})

    def test_negative_votes_raise(self, loader: VoteJsonLoader) -> None:
        with pytest.raises(InvalidVoteCountError) as exc_info:
            loader.load_dict({"pr": {"東北": {"a": -1}}})

        assert exc_info.value.region == "東北"

    def test_nan_votes_raise(self, loader: VoteJsonLoader) -> None:
        with pytest.raises(InvalidVoteCountError):
            loader.loads('{"fptp": {"北海道1区": [{"party": "a", "votes": NaN}]}}')

    def test_missing_party_raises(self, loader: VoteJsonLoader) -> None:
        with pytest.raises(VoteDataFormatError):
            loader.load_dict({"fptp": {"北海道1区": [{"votes": 10}]}})

    def test_wrong_shape_raises(self, loader: VoteJsonLoader) -> None:
        with pytest.raises(VoteDataFormatError):
            loader.load_dict({"pr": ["北海道"]})

    def test_invalid_json_raises(self, loader: VoteJsonLoader) -> None:
        with pytest.raises(VoteDataFormatError) as exc_info:
            loader.loads("{not json")

        assert "error" in exc_info.value.details

    def test_missing_file_raises(self, loader: VoteJsonLoader, tmp_path: Path) -> None:
        with pytest.raises(VoteDataFormatError):
            loader.load(tmp_path / "missing.json")


class TestStrictDistrictNames:
    def test_names_are_normalized(self) -> None:
        loader = VoteJsonLoader(strict_district_names=True)

        snapshot = loader.load_dict(
            {"fptp": {"東京１区": [{"party": "a", "votes": 1}]}}
        )

        assert snapshot.district_ids == ("東京都1区",)

    def test_unknown_district_raises(self) -> None:
        loader = VoteJsonLoader(strict_district_names=True)

        with pytest.raises(UnknownRegionError) as exc_info:
            loader.load_dict({"fptp": {"d1": [{"party": "a", "votes": 1}]}})

        assert exc_info.value.kind == "district"

    def test_duplicate_after_normalization_raises(self) -> None:
        loader = VoteJsonLoader(strict_district_names=True)
        data = {
            "fptp": {
                "東京1区": [{"party": "a", "votes": 1}],
                "東京都1区": [{"party": "b", "votes": 2}],
            }
        }

        with pytest.raises(VoteDataFormatError, match="重複"):
            loader.load_dict(data)
