# slacker/config/settings.py
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slacker.models.common import (
    DEFAULT_DATABASE_FILE_PATH,
    DEFAULT_ICON_EMOJI,
    DEFAULT_MESSAGE_TAG,
    DEFAULT_USERNAME,
    Recipient,
)


class Settings(BaseSettings):
    """환경변수(SLACKER_*) / .env 에서 읽는 설정."""

    model_config = SettingsConfigDict(
        env_prefix="SLACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 일반
    LOG_LEVEL: str = "INFO"

    # 웹훅 (필수, 빈 값이면 build 단계에서 ConfigInvalid)
    HOOK_URL: Optional[str] = None
    # JSON 배열: [{"channel": "#ops", "username": "@here"}]
    RECIPIENTS: List[Recipient] = Field(default_factory=list)

    # 표시 옵션
    ICON_EMOJI: str = DEFAULT_ICON_EMOJI
    USERNAME: str = DEFAULT_USERNAME

    # 중복 방지: always / once_per_hour / once_per_day (또는 0/1/2)
    FREQUENCY: str = "always"
    MESSAGE_TAG: str = DEFAULT_MESSAGE_TAG
    DATABASE_FILE_PATH: str = DEFAULT_DATABASE_FILE_PATH

    HTTP_TIMEOUT: float = 10.0
