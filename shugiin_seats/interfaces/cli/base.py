"""CLIコマンド共通のヘルパー."""

import functools
import logging

from collections.abc import Callable
from typing import Any

import click

from shugiin_seats.domain.exceptions import SeatAllocationException


logger = logging.getLogger(__name__)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """ドメイン例外をエラーメッセージと終了コード1に変換するデコレータ.

    失敗時は集計結果を一切出力しない。
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SeatAllocationException as e:
            logger.error("%s %s", e.message, e.details)
            click.echo(f"エラー: {e.message}", err=True)
            raise SystemExit(1) from e

    return wrapper
