"""議席計算コマンド."""

import logging

from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from pathlib import Path

import click

from shugiin_seats.application.dtos.seat_result_dto import ComputeSeatResultInputDto
from shugiin_seats.application.usecases.compute_seat_result_usecase import (
    ComputeSeatResultUseCase,
)
from shugiin_seats.infrastructure.config.settings import get_settings
from shugiin_seats.infrastructure.importers._constants import BLOCK_SEATS_BY_VERSION
from shugiin_seats.infrastructure.importers.vote_json_loader import VoteJsonLoader
from shugiin_seats.interfaces.cli.base import with_error_handling
from shugiin_seats.interfaces.cli.commands._seat_table import (
    resolve_block_seat_table,
)
from shugiin_seats.interfaces.cli.presenters.seat_result_presenter import (
    SeatResultPresenter,
)


logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "votes_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--seat-config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="比例ブロック定数テーブルのJSONファイル",
)
@click.option(
    "--seat-table",
    "seat_table_version",
    type=click.Choice(sorted(BLOCK_SEATS_BY_VERSION)),
    default=None,
    help="組み込みの定数テーブル（改定年）",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="出力形式",
)
@click.option("--by-block", is_flag=True, help="ブロック別・選挙区別の内訳も表示する")
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="並列実行のワーカー数（省略時は逐次実行）",
)
@click.option(
    "--strict-districts",
    is_flag=True,
    default=False,
    help="小選挙区名・小選挙区数を厳格に検証する",
)
@with_error_handling
def compute(
    votes_file: Path,
    seat_config: Path | None,
    seat_table_version: str | None,
    output_format: str,
    by_block: bool,
    workers: int | None,
    strict_districts: bool,
):
    """得票データから政党別の獲得議席を計算する."""
    settings = get_settings()
    strict = strict_districts or settings.strict_district_count

    table = resolve_block_seat_table(settings, seat_config, seat_table_version)
    snapshot = VoteJsonLoader(strict_district_names=strict).load(votes_file)

    executor_context = (
        ThreadPoolExecutor(max_workers=workers) if workers else nullcontext(None)
    )
    with executor_context as executor:
        use_case = ComputeSeatResultUseCase(table, executor=executor)
        result = use_case.execute(
            ComputeSeatResultInputDto(
                snapshot=snapshot,
                expected_fptp_districts=settings.expected_fptp_districts,
                strict_district_count=strict,
            )
        )

    presenter = SeatResultPresenter(table)
    if output_format == "json":
        click.echo(presenter.to_json(result, by_block=by_block))
    else:
        click.echo(presenter.to_text(result, by_block=by_block))
