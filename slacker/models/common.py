# 알림 전송 전체에서 공통으로 쓰이는 스키마 모아둔 곳

from enum import IntEnum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DATABASE_FILE_PATH = "slacker.json"
DEFAULT_MESSAGE_TAG = "default_tag"
DEFAULT_USERNAME = "Slacker Notifier"
DEFAULT_ICON_EMOJI = ":ghost:"


class FrequencyPolicy(IntEnum):
    ALWAYS = 0
    ONCE_PER_HOUR = 1
    ONCE_PER_DAY = 2

    @classmethod
    def parse(cls, value) -> "FrequencyPolicy":
        """0/1/2 정수, 이름("once_per_hour"), 또는 enum 그대로 허용."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            raw = value.strip()
            if raw.isdigit():
                return cls(int(raw))
            try:
                return cls[raw.upper()]
            except KeyError:
                raise ValueError(f"unknown frequency policy: {value!r}")
        return cls(value)


class Recipient(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel: str = Field(min_length=1)
    username: str = ""


class SlackMessage(BaseModel):
    channel: str
    username: str
    text: str
    icon_emoji: str


class NotifierConfig(BaseModel):
    """기본값이 모두 채워진 최종 설정. 생성 후에는 변경 불가.

    build_config() 로 만드는 것이 정식 경로다. 거기서만 빈 값 보정과
    ConfigInvalid 변환이 이뤄진다. 직접 생성하면 검증 실패가
    pydantic ValidationError 그대로 올라온다.
    """

    model_config = ConfigDict(frozen=True)

    hook_url: str = Field(min_length=1)
    recipients: List[Recipient] = Field(min_length=1)
    icon_emoji: str = DEFAULT_ICON_EMOJI
    username: str = DEFAULT_USERNAME
    frequency: FrequencyPolicy = FrequencyPolicy.ALWAYS
    message_tag: str = DEFAULT_MESSAGE_TAG
    database_file_path: str = DEFAULT_DATABASE_FILE_PATH
    http_timeout: float = Field(10.0, gt=0.0)

    @field_validator("frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, value):
        return FrequencyPolicy.parse(value)
