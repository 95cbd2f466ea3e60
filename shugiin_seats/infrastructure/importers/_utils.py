"""インポーターモジュール共通のユーティリティ関数."""

import re

from decimal import Decimal, InvalidOperation
from fractions import Fraction

from shugiin_seats.domain.exceptions import InvalidVoteCountError, UnknownRegionError
from shugiin_seats.domain.value_objects.vote_snapshot import VoteCount
from shugiin_seats.infrastructure.importers._constants import (
    PREFECTURE_NAMES,
    PROPORTIONAL_BLOCK_ALIASES,
    PROPORTIONAL_BLOCKS,
)


_BLOCK_SUFFIX = "ブロック"

# 「東京1区」「北海道12区」等
_DISTRICT_PATTERN = re.compile(r"^(.+?)\s*(\d+)\s*区$")

# 得票数として扱う桁数の上限（整数部・小数部）
_MAX_VOTE_DIGITS = 15
_MAX_FRACTION_DIGITS = 12

_BLOCK_IDS_BY_NAME: dict[str, str] = {
    name: block_id for block_id, name in PROPORTIONAL_BLOCKS.items()
}


def zen_to_han(text: str) -> str:
    """全角数字・記号を半角に変換する."""
    zen = "０１２３４５６７８９．，－"
    han = "0123456789.,-"
    table = str.maketrans(zen, han)
    return text.translate(table)


def normalize_prefecture(name: str) -> str:
    """都道府県名に接尾辞を補完する（「都」「道」「府」「県」の補完）."""
    if name in ("北海道",):
        return name
    if name in ("東京", "東京都"):
        return "東京都"
    if name in ("大阪", "大阪府"):
        return "大阪府"
    if name in ("京都", "京都府"):
        return "京都府"
    if name.endswith(("都", "道", "府", "県")):
        return name
    return name + "県"


def normalize_block_name(name: str) -> str:
    """比例ブロック名をブロック識別子に変換する.

    日本語名（「北海道」「東京都」「近畿ブロック」等）と識別子（"kinki"等）の
    どちらも受け付ける。

    Raises:
        UnknownRegionError: どのブロックにも該当しない
    """
    key = name.strip()
    if key.lower() in PROPORTIONAL_BLOCKS:
        return key.lower()
    key = key.removesuffix(_BLOCK_SUFFIX).strip()
    if key in _BLOCK_IDS_BY_NAME:
        return _BLOCK_IDS_BY_NAME[key]
    if key in PROPORTIONAL_BLOCK_ALIASES:
        return PROPORTIONAL_BLOCK_ALIASES[key]
    raise UnknownRegionError(name, kind="block")


def normalize_district_name(name: str) -> str:
    """小選挙区名を「都道府県名+番号+区」の正規形に変換する.

    例: "東京１区" → "東京都1区"

    Raises:
        UnknownRegionError: 都道府県名・区番号として解釈できない
    """
    match = _DISTRICT_PATTERN.match(zen_to_han(name.strip()))
    if not match:
        raise UnknownRegionError(name, kind="district")
    prefecture, number = match.groups()
    prefecture = normalize_prefecture(prefecture)
    if prefecture not in PREFECTURE_NAMES or int(number) < 1:
        raise UnknownRegionError(name, kind="district")
    return f"{prefecture}{int(number)}区"


def _has_excess_digits(number: Decimal) -> bool:
    if number.is_zero():
        return False
    _, digits, exponent = number.as_tuple()
    significant = "".join(map(str, digits)).rstrip("0")
    exponent += len(digits) - len(significant)
    return number.adjusted() >= _MAX_VOTE_DIGITS or exponent < -_MAX_FRACTION_DIGITS


def parse_vote_count(value: object, region: str, subject: str) -> VoteCount:
    """得票数を正確な数値（intまたはFraction）に変換する.

    JSONの小数はDecimalとして読み込まれている前提。按分票による小数
    （例: "12,345.678"）はFractionで保持し、整数値はintに揃える。

    Raises:
        InvalidVoteCountError: 負数・NaN・無限大・数値以外、または桁数が過大
    """
    if isinstance(value, bool):
        raise InvalidVoteCountError(region, subject, value)

    if isinstance(value, int):
        number: Decimal | int = value
    elif isinstance(value, (Decimal, float)):
        number = Decimal(str(value)) if isinstance(value, float) else value
    elif isinstance(value, str):
        text = zen_to_han(value.strip()).replace(",", "")
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise InvalidVoteCountError(region, subject, value) from None
    else:
        raise InvalidVoteCountError(region, subject, value)

    if isinstance(number, Decimal) and not number.is_finite():
        raise InvalidVoteCountError(region, subject, value)
    if number < 0:
        raise InvalidVoteCountError(region, subject, value)
    if isinstance(number, Decimal) and _has_excess_digits(number):
        raise InvalidVoteCountError(region, subject, value)

    votes = Fraction(number)
    if votes.denominator == 1:
        return int(votes)
    return votes
