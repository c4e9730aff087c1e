"""
Config builder module.

역할:
- 호출자가 넘긴 raw 설정(dict / 키워드)을 NotifierConfig로 변환한다.
- 필수 필드(hook_url, recipients) 검증과 기본값 보정을 한 곳에서 처리한다.
- 잘못된 입력은 ConfigInvalid로 통일해서 올려보낸다.
"""
from typing import Any, Dict, Optional

from pydantic import ValidationError

from slacker.config.settings import Settings
from slacker.core.errors import ConfigInvalid
from slacker.models.common import NotifierConfig


def build_config(raw: Optional[Dict[str, Any]] = None, **overrides: Any) -> NotifierConfig:
    """raw 딕셔너리 + 키워드 인자를 합쳐 기본값이 채워진 NotifierConfig를 만든다.

    - None / 빈 문자열인 선택 필드는 기본값으로 대체
    - recipients 항목은 dict 또는 (channel, username) 튜플 허용
    """
    cfg = dict(raw or {})
    cfg.update(overrides)

    if not cfg.get("hook_url"):
        raise ConfigInvalid("Web hook url is not set")
    if not cfg.get("recipients"):
        raise ConfigInvalid("Recipients are not set")

    # 비어 있는 선택 필드는 모델 기본값을 쓰도록 제거
    cfg = {k: v for k, v in cfg.items() if v is not None and v != ""}

    cfg["recipients"] = [
        {"channel": r[0], "username": r[1]} if isinstance(r, (tuple, list)) else r
        for r in cfg["recipients"]
    ]

    try:
        return NotifierConfig(**cfg)
    except (ValidationError, ValueError, TypeError) as e:
        raise ConfigInvalid(f"Invalid notifier config: {e}") from e


def settings_to_raw(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """환경변수 기반 Settings를 build_config 가 받는 raw 딕셔너리로 바꾼다."""
    try:
        s = settings or Settings()
    except ValidationError as e:
        raise ConfigInvalid(f"Invalid environment config: {e}") from e

    return {
        "hook_url": s.HOOK_URL,
        "recipients": s.RECIPIENTS,
        "icon_emoji": s.ICON_EMOJI,
        "username": s.USERNAME,
        "frequency": s.FREQUENCY,
        "message_tag": s.MESSAGE_TAG,
        "database_file_path": s.DATABASE_FILE_PATH,
        "http_timeout": s.HTTP_TIMEOUT,
    }


def build_config_from_settings(settings: Optional[Settings] = None, **overrides: Any) -> NotifierConfig:
    """Settings 값 위에 None 이 아닌 overrides 를 덮어써서 NotifierConfig를 만든다."""
    raw = settings_to_raw(settings)
    raw.update({k: v for k, v in overrides.items() if v is not None})
    return build_config(raw)
