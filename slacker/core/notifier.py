"""
Notifier module.

역할:
- fingerprint 계산 -> 중복 검사 -> 수신자별 전송 -> 전송 기록 순서로 처리한다.
- 수신자 중 하나라도 실패하면 나머지는 보내지 않고 DeliveryFailed를 올린다.
  (이미 보낸 수신자는 되돌리지 않는다. 기록도 남기지 않는다.)
- 전송 후 기록 저장이 실패하면 StoreUnavailable을 올린다.
  메시지는 이미 나갔으므로 같은 버킷 안에서 다시 전송될 수 있다.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from slacker.core.alerts.dedupe import mark_sent, should_send
from slacker.core.alerts.slack_alert import SlackWebhookClient
from slacker.core.config_builder import build_config
from slacker.core.errors import DeliveryFailed, StoreUnavailable
from slacker.core.fingerprint import compute_fingerprint
from slacker.core.record_store import JsonFileRecordStore, RecordStore
from slacker.models.common import NotifierConfig, SlackMessage

Clock = Callable[[], datetime]


class Slacker:
    """MessageTag / Frequency 정책에 따라 Slack 알림을 보낸다."""

    def __init__(
        self,
        config: NotifierConfig,
        *,
        store: Optional[RecordStore] = None,
        client: Optional[SlackWebhookClient] = None,
        log: Optional[logging.Logger] = None,
        clock: Clock = datetime.now,
    ):
        self.config = config
        self.store = store or JsonFileRecordStore(config.database_file_path)
        # 직접 만든 클라이언트만 close() 에서 닫는다. 주입된 것은 호출자 소유
        self._owns_client = client is None
        self.client = client or SlackWebhookClient(config.hook_url, timeout=config.http_timeout)
        self.log = log or logging.getLogger("slacker")
        self.clock = clock

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "Slacker":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_message(self, channel: str, prefix: str, message: str) -> SlackMessage:
        return SlackMessage(
            channel=channel,
            username=self.config.username,
            text=f"{prefix} {message}",
            icon_emoji=self.config.icon_emoji,
        )

    def send(self, message: str) -> None:
        cfg = self.config
        fingerprint = compute_fingerprint(cfg.frequency, cfg.message_tag, message, self.clock())

        if not should_send(cfg.frequency, fingerprint, self.store, log=self.log):
            self.log.info("Skip message %s: %s", fingerprint, message)
            return

        for recipient in cfg.recipients:
            slack_message = self.build_message(recipient.channel, recipient.username, message)
            try:
                response = self.client.send(slack_message)
            except DeliveryFailed as exc:
                self.log.error("Slacker failed to send message to %s: %s", recipient.channel, exc)
                raise

            self.log.info("Send message %s: %s %s", cfg.message_tag, message, response)

        try:
            mark_sent(fingerprint, message, self.store)
        except StoreUnavailable as exc:
            self.log.error("Slacker failed to record sent message: %s", exc)
            raise


def send(message: str, config, **kwargs) -> None:
    """한 번만 쓰는 호출용. config는 NotifierConfig 또는 raw dict."""
    if not isinstance(config, NotifierConfig):
        config = build_config(config)
    with Slacker(config, **kwargs) as slacker:
        slacker.send(message)
