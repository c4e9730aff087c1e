# tests/test_fingerprint.py

"""
fingerprint 모듈 단위 테스트.
"""

from datetime import datetime

from slacker.core.fingerprint import compute_fingerprint
from slacker.models.common import FrequencyPolicy

NOW = datetime(2024, 1, 2, 15, 42, 7)


def test_always_returns_empty_key():
    """ALWAYS 정책은 시간/본문을 인코딩하지 않는다."""
    assert compute_fingerprint(FrequencyPolicy.ALWAYS, "disk", "disk full", NOW) == ""


def test_once_per_hour_format():
    fp = compute_fingerprint(FrequencyPolicy.ONCE_PER_HOUR, "disk", "disk full", NOW)
    assert fp == "2024-01-02-15:disk:disk full"


def test_once_per_day_format():
    fp = compute_fingerprint(FrequencyPolicy.ONCE_PER_DAY, "disk", "disk full", NOW)
    assert fp == "2024-01-02:disk:disk full"


def test_integer_policy_accepted():
    """원래 상수값(1 = 시간당 1회)도 그대로 받는다."""
    assert compute_fingerprint(1, "t", "m", NOW) == "2024-01-02-15:t:m"


def test_deterministic_for_same_inputs():
    a = compute_fingerprint(FrequencyPolicy.ONCE_PER_HOUR, "tag", "msg", NOW)
    b = compute_fingerprint(FrequencyPolicy.ONCE_PER_HOUR, "tag", "msg", NOW)
    assert a == b


def test_tag_and_message_change_key():
    base = compute_fingerprint(FrequencyPolicy.ONCE_PER_DAY, "tag", "msg", NOW)
    assert compute_fingerprint(FrequencyPolicy.ONCE_PER_DAY, "other", "msg", NOW) != base
    assert compute_fingerprint(FrequencyPolicy.ONCE_PER_DAY, "tag", "other", NOW) != base


def test_same_bucket_shares_key():
    """같은 시간대 안의 다른 분/초는 같은 키."""
    later = datetime(2024, 1, 2, 15, 59, 59)
    assert compute_fingerprint(FrequencyPolicy.ONCE_PER_HOUR, "t", "m", NOW) == compute_fingerprint(
        FrequencyPolicy.ONCE_PER_HOUR, "t", "m", later
    )


def test_next_hour_changes_key():
    next_hour = datetime(2024, 1, 2, 16, 0, 0)
    assert compute_fingerprint(FrequencyPolicy.ONCE_PER_HOUR, "t", "m", NOW) != compute_fingerprint(
        FrequencyPolicy.ONCE_PER_HOUR, "t", "m", next_hour
    )
    # 일 단위는 같은 날이면 그대로
    assert compute_fingerprint(FrequencyPolicy.ONCE_PER_DAY, "t", "m", NOW) == compute_fingerprint(
        FrequencyPolicy.ONCE_PER_DAY, "t", "m", next_hour
    )
