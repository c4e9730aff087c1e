"""
Fingerprint module.

역할:
- 메시지 본문 + 태그 + 현재 시각으로 중복 방지 키를 만든다.
- 시간 버킷 단위(시간/일)는 FrequencyPolicy가 결정한다.
"""

from datetime import datetime

from slacker.models.common import FrequencyPolicy

HOUR_FORMAT = "%Y-%m-%d-%H"
DAY_FORMAT = "%Y-%m-%d"

_BUCKET_FORMATS = {
    FrequencyPolicy.ONCE_PER_HOUR: HOUR_FORMAT,
    FrequencyPolicy.ONCE_PER_DAY: DAY_FORMAT,
}


def compute_fingerprint(
    frequency: FrequencyPolicy,
    tag: str,
    message: str,
    now: datetime,
) -> str:
    """`<버킷>:<태그>:<메시지>` 형태의 키를 반환한다.

    ALWAYS 정책은 중복 검사를 하지 않으므로 빈 문자열을 돌려준다.
    """
    bucket_format = _BUCKET_FORMATS.get(FrequencyPolicy(frequency))
    if bucket_format is None:
        return ""
    return f"{now.strftime(bucket_format)}:{tag}:{message}"
