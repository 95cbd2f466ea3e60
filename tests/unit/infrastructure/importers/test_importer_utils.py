"""インポーター共通ユーティリティのテスト."""

from decimal import Decimal
from fractions import Fraction

import pytest

from shugiin_seats.domain.exceptions import InvalidVoteCountError, UnknownRegionError
from shugiin_seats.infrastructure.importers._utils import (
    normalize_block_name,
    normalize_district_name,
    normalize_prefecture,
    parse_vote_count,
    zen_to_han,
)


class TestZenToHan:
    def test_fullwidth_digits(self) -> None:
        assert zen_to_han("０１２３４５６７８９") == "0123456789"

    def test_fullwidth_separators(self) -> None:
        assert zen_to_han("１２，３４５．６") == "12,345.6"

    def test_halfwidth_passthrough(self) -> None:
        assert zen_to_han("abc123") == "abc123"


class TestNormalizePrefecture:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("北海道", "北海道"),
            ("東京", "東京都"),
            ("大阪", "大阪府"),
            ("京都", "京都府"),
            ("神奈川", "神奈川県"),
            ("神奈川県", "神奈川県"),
        ],
    )
    def test_suffix(self, name: str, expected: str) -> None:
        assert normalize_prefecture(name) == expected


class TestNormalizeBlockName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("北海道", "hokkaido"),
            ("東京", "tokyo"),
            ("東京都", "tokyo"),
            ("北陸信越", "hokuriku_shinetsu"),
            ("近畿ブロック", "kinki"),
            (" 九州 ", "kyushu"),
            ("kita_kanto", "kita_kanto"),
            ("Minami_Kanto", "minami_kanto"),
        ],
    )
    def test_known_names(self, name: str, expected: str) -> None:
        assert normalize_block_name(name) == expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownRegionError) as exc_info:
            normalize_block_name("沖縄")

        assert exc_info.value.region == "沖縄"
        assert exc_info.value.kind == "block"


class TestNormalizeDistrictName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("北海道1区", "北海道1区"),
            ("東京１区", "東京都1区"),
            ("神奈川18区", "神奈川県18区"),
            ("大阪府 3区", "大阪府3区"),
        ],
    )
    def test_known_names(self, name: str, expected: str) -> None:
        assert normalize_district_name(name) == expected

    @pytest.mark.parametrize("name", ["北海道", "アトランティス1区", "東京0区", "district-1"])
    def test_unknown_name_raises(self, name: str) -> None:
        with pytest.raises(UnknownRegionError) as exc_info:
            normalize_district_name(name)

        assert exc_info.value.kind == "district"


class TestParseVoteCount:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (94664, 94664),
            (0, 0),
            (Decimal("682912.0"), 682912),
            (Decimal("12345.678"), Fraction(12345678, 1000)),
            (1.5, Fraction(3, 2)),
            ("１２，３４５", 12345),
            ("12,345.5", Fraction(24691, 2)),
            (Decimal("1.000000000000000000000000"), 1),
            (Decimal("1E+2"), 100),
            ("999999999999999", 999999999999999),
        ],
    )
    def test_valid_values(self, value: object, expected: int | Fraction) -> None:
        result = parse_vote_count(value, "北海道", "ldp")

        assert result == expected
        assert type(result) is type(expected)

    @pytest.mark.parametrize(
        "value",
        [
            -1,
            Decimal("-0.5"),
            Decimal("NaN"),
            Decimal("Infinity"),
            float("nan"),
            float("inf"),
            True,
            None,
            "abc",
            "",
            [100],
            "1e999999999",
            Decimal("1E-999999999"),
            "1e15",
            Decimal("0.0000000000001"),
        ],
    )
    def test_invalid_values(self, value: object) -> None:
        with pytest.raises(InvalidVoteCountError) as exc_info:
            parse_vote_count(value, "北海道", "ldp")

        assert exc_info.value.region == "北海道"
        assert exc_info.value.subject == "ldp"
