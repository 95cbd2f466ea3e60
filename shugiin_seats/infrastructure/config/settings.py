"""アプリケーション設定.

環境変数（接頭辞 SHUGIIN_SEATS_）から設定を読み込む。
コマンドライン引数が指定された場合はそちらが優先される。
"""

import os

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel as PydanticBaseModel
from pydantic import Field, ValidationError

from shugiin_seats.domain.exceptions import ConfigurationError
from shugiin_seats.infrastructure.importers._constants import (
    DEFAULT_BLOCK_SEATS_VERSION,
    FPTP_TOTAL_SEATS,
)


ENV_PREFIX = "SHUGIIN_SEATS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(PydanticBaseModel):
    """アプリケーション設定."""

    log_level: str = "INFO"
    seat_config: Path | None = None
    seat_table_version: str = DEFAULT_BLOCK_SEATS_VERSION
    expected_fptp_districts: int | None = Field(default=FPTP_TOTAL_SEATS, ge=1)
    strict_district_count: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """環境変数から設定を構築する.

        Raises:
            ConfigurationError: 環境変数の値が不正
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw == "":
                continue
            if name == "strict_district_count":
                values[name] = raw.strip().lower() in _TRUE_VALUES
            else:
                values[name] = raw.strip()
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            fields = sorted(
                {
                    ENV_PREFIX + str(error["loc"][0]).upper()
                    for error in e.errors()
                    if error["loc"]
                }
            )
            raise ConfigurationError(
                f"環境変数の値が不正です: {', '.join(fields)}",
                {"error": str(e)},
            ) from e


_settings: Settings | None = None


def get_settings() -> Settings:
    """設定を取得する（初回のみ環境変数から読み込む）."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """環境変数から設定を読み直す."""
    global _settings
    _settings = Settings.from_env()
    return _settings
