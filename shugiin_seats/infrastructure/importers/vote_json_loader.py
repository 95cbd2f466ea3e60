"""得票データJSONローダー — Infrastructure layer.

JSONファイルを読み込み、検証済みのVoteSnapshotに変換する。

ファイル構造:
    {
      "pr":   {"北海道": {"自由民主党": 863300, ...}, ...},
      "fptp": {"北海道1区": [{"name": "...", "party": "...", "votes": 94664}, ...], ...}
    }

    - 比例ブロック名は日本語名・識別子のどちらでもよい
    - 小選挙区の候補者名は省略可（省略時は「政党名#順番」）。同一政党から
      複数人が立候補する選挙区があるため、政党名だけでは候補者を区別できない
    - 得票数は整数・小数（按分票）・全角数字やカンマ区切りの文字列を受け付ける
"""

import json
import logging

from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ValidationError

from shugiin_seats.domain.exceptions import VoteDataFormatError
from shugiin_seats.domain.value_objects.vote_snapshot import (
    VoteSnapshot,
    VoteSnapshotBuilder,
)
from shugiin_seats.infrastructure.importers._utils import (
    normalize_block_name,
    normalize_district_name,
    parse_vote_count,
)


logger = logging.getLogger(__name__)


class FptpCandidateVotesModel(PydanticBaseModel):
    """小選挙区の候補者1名分のレコード."""

    name: str | None = None
    party: str
    votes: Any


class VotesDataModel(PydanticBaseModel):
    """得票データファイル全体."""

    pr: dict[str, dict[str, Any]] = {}
    fptp: dict[str, list[FptpCandidateVotesModel]] = {}


def _parse_json(text: str, source: str) -> Any:
    try:
        return json.loads(text, parse_float=Decimal, parse_constant=Decimal)
    except json.JSONDecodeError as e:
        raise VoteDataFormatError(
            f"得票データのJSONを読み込めません: {source}",
            {"source": source, "error": str(e)},
        ) from e


class VoteJsonLoader:
    """得票データJSONのローダー.

    Args:
        strict_district_names: Trueの場合、小選挙区名を「都道府県名+番号+区」として
            検証・正規化する（解釈できない名前はUnknownRegionError）
    """

    def __init__(self, strict_district_names: bool = False) -> None:
        self._strict_district_names = strict_district_names

    def load(self, path: Path) -> VoteSnapshot:
        """ファイルから得票スナップショットを読み込む."""
        logger.info("得票データ読み込み: %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise VoteDataFormatError(
                f"得票データファイルを開けません: {path}",
                {"source": str(path), "error": str(e)},
            ) from e
        return self.load_dict(_parse_json(text, str(path)), source=str(path))

    def loads(self, text: str) -> VoteSnapshot:
        return self.load_dict(_parse_json(text, "<string>"), source="<string>")

    def load_dict(self, data: Any, source: str = "<dict>") -> VoteSnapshot:
        """パース済みのデータからスナップショットを構築する."""
        try:
            model = VotesDataModel.model_validate(data)
        except ValidationError as e:
            raise VoteDataFormatError(
                f"得票データの構造が不正です: {source}",
                {"source": source, "error": str(e)},
            ) from e

        builder = VoteSnapshotBuilder()
        try:
            self._add_blocks(builder, model)
            self._add_districts(builder, model)
        except ValueError as e:
            raise VoteDataFormatError(str(e), {"source": source}) from e

        snapshot = builder.build()
        logger.info(
            "得票データ読み込み完了: 比例ブロック=%d, 小選挙区=%d",
            len(snapshot.pr),
            len(snapshot.fptp),
        )
        return snapshot

    def _add_blocks(self, builder: VoteSnapshotBuilder, model: VotesDataModel) -> None:
        for block_name, party_votes in model.pr.items():
            block = normalize_block_name(block_name)
            votes = {
                party: parse_vote_count(value, block_name, party)
                for party, value in party_votes.items()
            }
            builder.add_block(block, votes)

    def _add_districts(
        self,
        builder: VoteSnapshotBuilder,
        model: VotesDataModel,
    ) -> None:
        seen: set[str] = set()
        for district_name, records in model.fptp.items():
            district = (
                normalize_district_name(district_name)
                if self._strict_district_names
                else district_name.strip()
            )
            if district in seen:
                msg = f"小選挙区「{district}」が重複しています"
                raise ValueError(msg)
            seen.add(district)
            if not records:
                logger.warning("候補者のいない小選挙区: %s", district_name)
            builder.add_district(district)
            for index, record in enumerate(records, 1):
                name = record.name or f"{record.party}#{index}"
                votes = parse_vote_count(record.votes, district_name, name)
                builder.add_candidate(district, name, record.party, votes)
