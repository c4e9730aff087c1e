"""
알림 중복 방지(De-dup) 유틸.

RecordStore에 이미 기록된 fingerprint면 전송을 건너뛴다.
기록은 매 호출마다 저장소에서 다시 읽으므로 메모리 캐시는 없다.
여러 프로세스가 같은 파일을 쓰는 경우는 호출 측에서 직렬화해야 한다.
"""

from __future__ import annotations

import logging
from typing import Optional

from slacker.core.errors import StoreUnavailable
from slacker.core.record_store import RecordStore
from slacker.models.common import FrequencyPolicy

logger = logging.getLogger(__name__)


def should_send(
    frequency: FrequencyPolicy,
    fingerprint: str,
    store: RecordStore,
    *,
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    True면 전송 가능, False면 스킵.
    ALWAYS 정책은 저장소를 보지 않고 바로 True.
    저장소를 못 읽으면 경고만 남기고 True (중복 전송 > 누락).
    """
    if frequency == FrequencyPolicy.ALWAYS:
        return True

    try:
        record = store.load()
    except StoreUnavailable as exc:
        (log or logger).warning("Slacker failed to load database: %s", exc)
        return True

    return fingerprint not in record


def mark_sent(fingerprint: str, message: str, store: RecordStore) -> None:
    """해당 fingerprint로 전송되었음을 기록."""
    try:
        record = store.load()
    except StoreUnavailable as exc:
        raise StoreUnavailable(f"failed to add {fingerprint}:{message} to database: {exc}") from exc

    record[fingerprint] = message

    try:
        store.save(record)
    except StoreUnavailable as exc:
        raise StoreUnavailable(f"failed to add {fingerprint} to database: {exc}") from exc
