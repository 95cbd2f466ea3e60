"""議席配分ドメインの例外定義.

すべての例外は入力データの妥当性に起因するもので、再試行しても結果は変わらない。
検出した時点で計算全体を中断し、部分的な集計結果は返さない。
"""

from typing import Any


class SeatAllocationException(Exception):
    """議席配分処理の基底例外.

    Args:
        message: 利用者向けのエラーメッセージ
        details: 問題のある選挙区・ブロック等の付加情報
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EmptyDistrictError(SeatAllocationException):
    """小選挙区に候補者が1人もいない."""

    def __init__(self, district: str) -> None:
        super().__init__(
            f"小選挙区「{district}」に候補者がいません",
            {"district": district},
        )
        self.district = district


class NoVotesError(SeatAllocationException):
    """比例ブロックの総得票数が0で、議席を配分できない."""

    def __init__(self, block: str) -> None:
        super().__init__(
            f"比例ブロック「{block}」の得票数がすべて0のため議席を配分できません",
            {"block": block},
        )
        self.block = block


class UnknownRegionError(SeatAllocationException):
    """ブロック名または選挙区名が設定テーブルに存在しない."""

    def __init__(self, region: str, kind: str = "block") -> None:
        label = "比例ブロック" if kind == "block" else "小選挙区"
        super().__init__(
            f"未知の{label}です: 「{region}」",
            {"region": region, "kind": kind},
        )
        self.region = region
        self.kind = kind


class InvalidVoteCountError(SeatAllocationException):
    """得票数が負数・非有限値・数値以外のいずれか."""

    def __init__(self, region: str, subject: str, value: object) -> None:
        super().__init__(
            f"「{region}」の「{subject}」の得票数が不正です: {value!r}",
            {"region": region, "subject": subject, "value": repr(value)},
        )
        self.region = region
        self.subject = subject
        self.value = value


class SeatConfigMismatchError(SeatAllocationException):
    """ブロック別定数の合計が比例代表の総定数と一致しない."""

    def __init__(self, actual_total: int, expected_total: int, reason: str = "") -> None:
        message = (
            f"比例ブロック定数の合計({actual_total})が総定数({expected_total})と"
            "一致しません"
        )
        if reason:
            message = reason
        super().__init__(
            message,
            {"actual_total": actual_total, "expected_total": expected_total},
        )
        self.actual_total = actual_total
        self.expected_total = expected_total


class DistrictCountMismatchError(SeatAllocationException):
    """小選挙区数が期待値と一致しない（厳格モードのみ）."""

    def __init__(self, actual_count: int, expected_count: int) -> None:
        super().__init__(
            f"小選挙区数({actual_count})が定数({expected_count})と一致しません",
            {"actual_count": actual_count, "expected_count": expected_count},
        )
        self.actual_count = actual_count
        self.expected_count = expected_count


class VoteDataFormatError(SeatAllocationException):
    """得票データファイルの構造が不正."""


class ConfigurationError(SeatAllocationException):
    """環境変数・定数テーブル指定などの設定値が不正."""
